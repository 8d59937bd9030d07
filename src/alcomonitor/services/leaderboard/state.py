"""Pure leaderboard transitions: (old state, action) -> new state.

Nothing in here touches the clock or allocates ids; callers pass those in,
which keeps every transition deterministic.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from alcomonitor.services.leaderboard.errors import (
    InvalidLabelError,
    InvalidSeedError,
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


def score_rank(entry: Entry) -> int:
    return -entry.score


def rank_entries(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Sort by descending score and keep the top LEADERBOARD_CAPACITY.

    ``sorted`` is stable, so equal scores keep the order they were given in;
    a later tie therefore lands after earlier ones and is the first to fall
    off the end.
    """
    return tuple(sorted(entries, key=score_rank)[:LEADERBOARD_CAPACITY])


def normalize_label(label: str) -> str:
    """Strip surrounding whitespace and uppercase.

    Raises:
        InvalidLabelError: If the result is not exactly LABEL_LENGTH long.
    """
    normalized = label.strip().upper()
    if len(normalized) != LABEL_LENGTH:
        raise InvalidLabelError(label)
    return normalized


def is_in_range(score: int) -> bool:
    return MIN_READING <= score < MAX_READING


def is_qualifying(state: LeaderboardState, score: int) -> bool:
    """True if ``score`` would make the board if committed now."""
    if len(state.entries) < LEADERBOARD_CAPACITY:
        return True
    return score > state.entries[-1].score


def begin_registration(state: LeaderboardState, score: int) -> LeaderboardState:
    """Stage ``score``, replacing whatever was pending before."""
    if not is_in_range(score):
        raise ReadingOutOfRangeError(score)
    if not is_qualifying(state, score):
        raise NotQualifyingError(score, state.floor_score)
    return replace(state, pending=PendingRegistration(score=score))


def cancel_registration(state: LeaderboardState) -> LeaderboardState:
    if state.pending is None:
        return state
    return replace(state, pending=None)


def commit(
    state: LeaderboardState,
    label: str,
    entry_id: int,
    recorded_on: date,
) -> tuple[LeaderboardState, Entry]:
    """Turn the pending registration into a ranked Entry.

    The entry is appended, the board is re-ranked and then truncated. When the
    board is full and the new score ties the floor, the new entry sorts after
    the existing ties and is dropped straight away; it is still returned.

    Raises:
        NoPendingRegistrationError: Nothing is staged.
        InvalidLabelError: ``label`` is not three characters; state unchanged.
    """
    if state.pending is None:
        raise NoPendingRegistrationError()
    normalized = normalize_label(label)

    entry = Entry(
        id=entry_id,
        label=normalized,
        score=state.pending.score,
        recorded_on=recorded_on,
    )
    entries = rank_entries([*state.entries, entry])
    return LeaderboardState(entries=entries, pending=None), entry


def validate_entries(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Check that ``entries`` already satisfies every board invariant.

    Returns the entries as a tuple so callers can use the result directly.

    Raises:
        InvalidSeedError: On the first violated invariant.
    """
    checked = tuple(entries)
    if len(checked) > LEADERBOARD_CAPACITY:
        raise InvalidSeedError(
            f"Seed holds {len(checked)} entries, capacity is {LEADERBOARD_CAPACITY}"
        )

    seen_ids: set[int] = set()
    for position, entry in enumerate(checked):
        if entry.id in seen_ids:
            raise InvalidSeedError(f"Duplicate entry id {entry.id}")
        seen_ids.add(entry.id)

        if not is_in_range(entry.score):
            raise InvalidSeedError(f"Entry {entry.id} has out-of-range score {entry.score}")
        if len(entry.label) != LABEL_LENGTH or entry.label != entry.label.strip().upper():
            raise InvalidSeedError(f"Entry {entry.id} has invalid label {entry.label!r}")
        if position and checked[position - 1].score < entry.score:
            raise InvalidSeedError(
                f"Seed is not sorted by descending score at position {position + 1}"
            )

    return checked
