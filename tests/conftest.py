"""Shared pytest fixtures for test modules."""

import os

import pytest

from leaderboard.domain.participant import Participant, ThresholdConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all LEADERBOARD__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("LEADERBOARD__"):
            monkeypatch.delenv(key)


@pytest.fixture
def thresholds() -> ThresholdConfig:
    return ThresholdConfig(first=95, second=85, third=75)


@pytest.fixture
def podium() -> list[Participant]:
    return [
        Participant(id="A", score=100),
        Participant(id="B", score=90),
        Participant(id="C", score=80),
        Participant(id="D", score=10),
    ]
