import logging
from collections import Counter
from collections.abc import Sequence

from leaderboard.domain.errors import InvalidInput
from leaderboard.domain.participant import Participant, ThresholdConfig
from leaderboard.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS = 1
MAX_PARTICIPANTS = 100


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_thresholds(thresholds: ThresholdConfig) -> list[str]:
    values = (thresholds.first, thresholds.second, thresholds.third)
    if not all(_is_int(v) for v in values):
        return [f"thresholds must be integers, got {values}"]
    if not thresholds.first > thresholds.second > thresholds.third > 0:
        return [
            "thresholds must satisfy first > second > third > 0, "
            f"got first={thresholds.first} second={thresholds.second} third={thresholds.third}"
        ]
    return []


def check_participants(participants: Sequence[Participant]) -> list[str]:
    reasons: list[str] = []
    count = len(participants)
    if not MIN_PARTICIPANTS <= count <= MAX_PARTICIPANTS:
        reasons.append(f"expected {MIN_PARTICIPANTS}-{MAX_PARTICIPANTS} participants, got {count}")

    for p in participants:
        if not _is_int(p.score):
            reasons.append(f"participant {p.id!r}: score must be an integer, got {p.score!r}")
        elif p.score <= 0:
            reasons.append(f"participant {p.id!r}: score must be positive, got {p.score}")

    id_counts = Counter(p.id for p in participants)
    reasons.extend(f"duplicate participant id {pid!r}" for pid, n in id_counts.items() if n > 1)

    score_counts = Counter(p.score for p in participants)
    reasons.extend(f"duplicate score {score!r}" for score, n in score_counts.items() if n > 1)
    return reasons


def validate_input(participants: Sequence[Participant], thresholds: ThresholdConfig) -> None:
    """Raise InvalidInputError listing every contract violation, if any."""
    reasons = check_participants(participants) + check_thresholds(thresholds)
    if reasons:
        logger.debug("Rejected input: %s", "; ".join(reasons))
        raise InvalidInputError(InvalidInput(message=f"Invalid input: {reasons[0]}", reasons=tuple(reasons)))
