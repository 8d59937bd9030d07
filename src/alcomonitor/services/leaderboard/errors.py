"""Recoverable leaderboard failures.

None of these are fatal: callers catch ``LeaderboardError`` and re-prompt or
simply stop offering the action.
"""


class LeaderboardError(Exception):
    """Base class for every leaderboard failure."""


class NotQualifyingError(LeaderboardError):
    """Registration attempted for a score that does not beat the floor."""

    def __init__(self, score: int, floor: int | None) -> None:
        super().__init__(f"Score {score} does not beat the current floor of {floor}")
        self.score = score
        self.floor = floor


class ReadingOutOfRangeError(LeaderboardError):
    """Candidate score falls outside the reading domain."""

    def __init__(self, score: int) -> None:
        super().__init__(f"Reading {score} is outside the range [0, 1000)")
        self.score = score


class NoPendingRegistrationError(LeaderboardError):
    """Commit attempted with no staged candidate."""

    def __init__(self) -> None:
        super().__init__("No pending registration to commit")


class InvalidLabelError(LeaderboardError):
    """Label is not exactly three characters after normalization."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Name must be exactly 3 characters, got {label!r}")
        self.label = label


class InvalidSeedError(LeaderboardError):
    """Seed entries break the leaderboard invariants."""
