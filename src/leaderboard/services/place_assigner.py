import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from leaderboard.domain.participant import AWARD_PLACES, Participant, RankedParticipant, ThresholdConfig
from leaderboard.services.validation import validate_input

logger = logging.getLogger(__name__)


@runtime_checkable
class PlaceCalculator(Protocol):
    def calculate_places(
        self, participants: Sequence[Participant], thresholds: ThresholdConfig
    ) -> list[RankedParticipant]: ...


def assign_places(
    participants: Sequence[Participant],
    thresholds: ThresholdConfig,
    *,
    validate: bool = False,
) -> list[RankedParticipant]:
    """Assign a place to every participant.

    Award places 1-3 go to the top-scoring participants that clear the
    per-place minimums, each candidate taking the first open place (in order
    1, 2, 3) whose minimum it meets. Everyone else is numbered from 4 in
    descending score order, however many award places were granted.

    Args:
        participants: Participants with distinct positive scores.
        thresholds: Minimum scores for places 1, 2 and 3.
        validate: Check the input contract first and raise
            ``InvalidInputError`` on any violation.

    Returns:
        One RankedParticipant per participant: award holders in the order
        they were granted, then the remainder by descending score.
    """
    if validate:
        validate_input(participants, thresholds)

    ordered = sorted(participants, key=lambda p: p.score, reverse=True)
    candidates = _award_candidates(ordered, thresholds)
    logger.debug("%d of %d participants are award candidates", len(candidates), len(ordered))

    awards = _grant_awards(ordered, candidates, thresholds)
    winners = [RankedParticipant(id=ordered[idx].id, place=place) for idx, place in awards]
    awarded = {idx for idx, _ in awards}

    remainder = [p for idx, p in enumerate(ordered) if idx not in awarded]
    logger.debug("Ranking %d participants from place %d", len(remainder), AWARD_PLACES + 1)
    losers = [RankedParticipant(id=p.id, place=idx + AWARD_PLACES + 1) for idx, p in enumerate(remainder)]

    return winners + losers


def _award_candidates(ordered: list[Participant], thresholds: ThresholdConfig) -> list[int]:
    # Scores below the third-place minimum never compete for an award
    return [idx for idx, p in enumerate(ordered) if p.score >= thresholds.third][:AWARD_PLACES]


def _grant_awards(
    ordered: list[Participant], candidates: list[int], thresholds: ThresholdConfig
) -> list[tuple[int, int]]:
    """Return (index into ordered, place) for each candidate granted an award."""
    awards: list[tuple[int, int]] = []
    taken: set[int] = set()
    for idx in candidates:
        candidate = ordered[idx]
        for place, minimum in thresholds.award_gates():
            if candidate.score < minimum or place in taken:
                continue
            taken.add(place)
            awards.append((idx, place))
            logger.debug("Place %d -> %s (score %d)", place, candidate.id, candidate.score)
            break
        else:
            logger.debug("No open award place for %s (score %d)", candidate.id, candidate.score)
    return awards


class LeaderboardCalculator:
    """PlaceCalculator backed by assign_places."""

    def __init__(self, *, validate: bool = False) -> None:
        self._validate = validate

    def calculate_places(
        self, participants: Sequence[Participant], thresholds: ThresholdConfig
    ) -> list[RankedParticipant]:
        return assign_places(participants, thresholds, validate=self._validate)
