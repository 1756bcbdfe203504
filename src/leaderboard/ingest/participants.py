from collections.abc import Mapping

from leaderboard.domain.errors import InvalidInput
from leaderboard.domain.participant import Participant
from leaderboard.exceptions import InvalidInputError


def row_to_participant(row: Mapping[str, str | None], *, id_column: str, score_column: str) -> Participant:
    """Map one CSV row to a Participant, rejecting blank or non-integer values."""
    participant_id = (row.get(id_column) or "").strip()
    raw_score = (row.get(score_column) or "").strip()
    missing = [col for col, value in ((id_column, participant_id), (score_column, raw_score)) if not value]
    if missing:
        raise InvalidInputError(InvalidInput(message=f"Row {dict(row)!r} is missing {', '.join(missing)}"))

    try:
        score = int(raw_score)
    except ValueError:
        raise InvalidInputError(
            InvalidInput(message=f"Participant {participant_id!r}: score {raw_score!r} is not an integer")
        ) from None
    return Participant(id=participant_id, score=score)
