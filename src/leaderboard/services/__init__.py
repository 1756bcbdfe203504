"""Place assignment services."""

from leaderboard.services.place_assigner import LeaderboardCalculator, PlaceCalculator, assign_places
from leaderboard.services.validation import validate_input

__all__ = [
    "LeaderboardCalculator",
    "PlaceCalculator",
    "assign_places",
    "validate_input",
]
