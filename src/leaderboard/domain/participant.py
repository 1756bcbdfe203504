from collections.abc import Iterator
from dataclasses import dataclass

AWARD_PLACES = 3


@dataclass(frozen=True)
class Participant:
    id: str
    score: int


@dataclass(frozen=True)
class ThresholdConfig:
    """Minimum scores for award places 1, 2 and 3 (first > second > third > 0)."""

    first: int
    second: int
    third: int

    def minimum_for(self, place: int) -> int:
        if place == 1:
            return self.first
        if place == 2:
            return self.second
        if place == 3:
            return self.third
        msg = f"Place {place} is not an award place"
        raise ValueError(msg)

    def award_gates(self) -> Iterator[tuple[int, int]]:
        """Yield (place, minimum score) pairs in the order places are tried."""
        for place in range(1, AWARD_PLACES + 1):
            yield place, self.minimum_for(place)


@dataclass(frozen=True)
class RankedParticipant:
    id: str
    place: int
