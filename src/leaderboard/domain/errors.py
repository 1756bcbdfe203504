from dataclasses import dataclass


@dataclass(frozen=True)
class LeaderboardError:
    message: str


@dataclass(frozen=True)
class InvalidInput(LeaderboardError):
    reasons: tuple[str, ...] = ()
