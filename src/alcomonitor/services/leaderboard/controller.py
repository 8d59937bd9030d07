"""LeaderboardController - owns the board and the single registration slot."""

import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from alcomonitor.services.leaderboard import state as transitions
from alcomonitor.services.leaderboard.errors import LeaderboardError
from alcomonitor.services.leaderboard.models import (
    Entry,
    LeaderboardState,
    PendingRegistration,
)

_log = logging.getLogger(__name__)


class LeaderboardController:
    """Holds the current LeaderboardState and applies transitions to it.

    Ids come from a counter that starts above the highest seeded id;
    commit dates come from ``today`` so tests can pin the calendar.
    """

    def __init__(
        self,
        seed: Iterable[Entry] = (),
        today: Callable[[], date] = date.today,
    ) -> None:
        entries = transitions.validate_entries(seed)
        self._state = LeaderboardState(entries=entries)
        self._today = today
        self._next_id = max((entry.id for entry in entries), default=0) + 1

    @property
    def state(self) -> LeaderboardState:
        return self._state

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._state.entries

    @property
    def pending(self) -> PendingRegistration | None:
        return self._state.pending

    @property
    def floor_score(self) -> int | None:
        return self._state.floor_score

    def is_qualifying(self, candidate_score: int) -> bool:
        return transitions.is_qualifying(self._state, candidate_score)

    def begin_registration(self, candidate_score: int) -> PendingRegistration:
        """Stage ``candidate_score`` for naming.

        Raises:
            NotQualifyingError: The score does not beat the current floor.
            ReadingOutOfRangeError: The score is outside [0, 1000).
        """
        replaced = self._state.pending
        try:
            self._state = transitions.begin_registration(self._state, candidate_score)
        except LeaderboardError as exc:
            _log.debug("Registration of %d rejected: %s", candidate_score, exc)
            raise
        if replaced is not None:
            _log.debug("Pending score %d replaced by %d", replaced.score, candidate_score)
        return self._state.pending

    def cancel_registration(self) -> None:
        if self._state.pending is not None:
            _log.debug("Registration of %d cancelled", self._state.pending.score)
        self._state = transitions.cancel_registration(self._state)

    def commit(self, label: str) -> Entry:
        """Commit the pending score under ``label``.

        The returned Entry may already have been evicted when it tied the
        floor of a full board; check ``rank_of(entry.id)`` when that matters.

        Raises:
            NoPendingRegistrationError: Nothing is staged.
            InvalidLabelError: Bad label; the pending score is kept for retry.
        """
        new_state, entry = transitions.commit(
            self._state,
            label,
            entry_id=self._next_id,
            recorded_on=self._today(),
        )
        self._next_id += 1
        self._state = new_state

        rank = self.rank_of(entry.id)
        # Unreachable while begin_registration refuses ties at the floor.
        if rank is None:
            _log.info("Entry %s (%d) tied the floor and was evicted", entry.label, entry.score)
        else:
            _log.info("Entry %s (%d) ranked #%d", entry.label, entry.score, rank)
        return entry

    def rank_of(self, entry_id: int) -> int | None:
        """1-based rank of ``entry_id``, or None if it is not on the board."""
        for rank, entry in enumerate(self._state.entries, start=1):
            if entry.id == entry_id:
                return rank
        return None

    def export_records(self) -> list[dict[str, Any]]:
        """Board in rank order as JSON-ready dicts."""
        return [entry.to_dict() for entry in self._state.entries]
