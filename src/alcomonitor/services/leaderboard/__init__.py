"""Leaderboard services: bounded top-10 board with staged registration."""

from alcomonitor.services.leaderboard.controller import LeaderboardController
from alcomonitor.services.leaderboard.errors import (
    InvalidLabelError,
    InvalidSeedError,
    LeaderboardError,
    NoPendingRegistrationError,
    NotQualifyingError,
    ReadingOutOfRangeError,
)
from alcomonitor.services.leaderboard.models import (
    LABEL_LENGTH,
    LEADERBOARD_CAPACITY,
    MAX_READING,
    MIN_READING,
    Entry,
    LeaderboardState,
    PendingRegistration,
)

__all__ = [
    "LABEL_LENGTH",
    "LEADERBOARD_CAPACITY",
    "MAX_READING",
    "MIN_READING",
    "Entry",
    "InvalidLabelError",
    "InvalidSeedError",
    "LeaderboardController",
    "LeaderboardError",
    "LeaderboardState",
    "NoPendingRegistrationError",
    "NotQualifyingError",
    "PendingRegistration",
    "ReadingOutOfRangeError",
]
