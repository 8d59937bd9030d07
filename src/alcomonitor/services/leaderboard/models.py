"""Leaderboard data model: entries, the pending slot and the owned state."""

from dataclasses import dataclass
from datetime import date
from typing import Any

LEADERBOARD_CAPACITY = 10
LABEL_LENGTH = 3

# Readings live in [MIN_READING, MAX_READING)
MIN_READING = 0
MAX_READING = 1000


@dataclass(frozen=True)
class Entry:
    """A permanent leaderboard record."""

    id: int
    label: str
    score: int
    recorded_on: date

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "score": self.score,
            "date": self.recorded_on.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Build an Entry from its plain-dict form.

        Accepts ``name`` as an alias for ``label`` so hand-written seed files
        can use either key.
        """
        label = data.get("label", data.get("name"))
        if label is None:
            raise KeyError("label")
        return cls(
            id=int(data["id"]),
            label=str(label),
            score=int(data["score"]),
            recorded_on=date.fromisoformat(data["date"]),
        )


@dataclass(frozen=True)
class PendingRegistration:
    """A staged candidate score awaiting a label."""

    score: int


@dataclass(frozen=True)
class LeaderboardState:
    """Everything the leaderboard owns.

    ``entries`` is kept sorted by descending score with ties in insertion
    order and never holds more than LEADERBOARD_CAPACITY items.
    """

    entries: tuple[Entry, ...] = ()
    pending: PendingRegistration | None = None

    @property
    def is_full(self) -> bool:
        return len(self.entries) >= LEADERBOARD_CAPACITY

    @property
    def floor_score(self) -> int | None:
        """Score to beat when the board is full, None while there is room."""
        if not self.is_full:
            return None
        return self.entries[-1].score
