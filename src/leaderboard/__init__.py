from leaderboard.domain.participant import AWARD_PLACES, Participant, RankedParticipant, ThresholdConfig
from leaderboard.exceptions import ConfigError, InvalidInputError, LeaderboardException
from leaderboard.services import LeaderboardCalculator, PlaceCalculator, assign_places

__all__ = [
    "AWARD_PLACES",
    "ConfigError",
    "InvalidInputError",
    "LeaderboardCalculator",
    "LeaderboardException",
    "Participant",
    "PlaceCalculator",
    "RankedParticipant",
    "ThresholdConfig",
    "assign_places",
]
