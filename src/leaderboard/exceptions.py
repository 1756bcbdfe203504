from leaderboard.domain.errors import InvalidInput


class LeaderboardException(Exception):
    """Base exception for the leaderboard package."""


class InvalidInputError(LeaderboardException):
    """Raised when participants or thresholds violate the input contract."""

    def __init__(self, error: InvalidInput) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def reasons(self) -> tuple[str, ...]:
        return self.error.reasons


class ConfigError(LeaderboardException):
    """Raised when threshold configuration is invalid."""
