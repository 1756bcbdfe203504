import csv
import logging
from pathlib import Path

from leaderboard.domain.errors import InvalidInput
from leaderboard.domain.participant import Participant
from leaderboard.exceptions import InvalidInputError
from leaderboard.ingest.participants import row_to_participant

logger = logging.getLogger(__name__)


class CsvParticipantSource:
    """Participants read from a CSV file with a header row.

    ``utf-8-sig`` strips a leading byte-order mark, so spreadsheet exports
    keep their first column name intact.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        id_column: str = "id",
        score_column: str = "score",
        delimiter: str = ",",
        encoding: str = "utf-8-sig",
    ) -> None:
        self._path = Path(path)
        self._id_column = id_column
        self._score_column = score_column
        self._delimiter = delimiter
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[Participant]:
        logger.debug("Reading participants from %s", self._path)
        try:
            with open(self._path, encoding=self._encoding, newline="") as f:
                reader = csv.DictReader(f, delimiter=self._delimiter)
                self._check_header(reader.fieldnames)
                participants = [
                    row_to_participant(row, id_column=self._id_column, score_column=self._score_column)
                    for row in reader
                ]
        except UnicodeDecodeError as e:
            raise self._unreadable(f"not valid {self._encoding} text ({e.reason} at byte {e.start})") from e
        except csv.Error as e:
            raise self._unreadable(f"malformed CSV ({e})") from e
        except OSError as e:
            raise self._unreadable(e.strerror or str(e)) from e
        logger.debug("Read %d participants from %s", len(participants), self._path)
        return participants

    def _check_header(self, fieldnames: list[str] | None) -> None:
        if fieldnames is None:
            return
        missing = [col for col in (self._id_column, self._score_column) if col not in fieldnames]
        if missing:
            found = ", ".join(repr(name) for name in fieldnames)
            raise InvalidInputError(
                InvalidInput(message=f"{self._path}: missing column {', '.join(map(repr, missing))} (found {found})")
            )

    def _unreadable(self, detail: str) -> InvalidInputError:
        return InvalidInputError(InvalidInput(message=f"cannot read {self._path}: {detail}"))
