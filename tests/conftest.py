"""Shared test fixtures for alcomonitor tests."""

from collections.abc import Callable
from datetime import date

import pytest

from alcomonitor.services.leaderboard import Entry, LeaderboardController

FIXED_DAY = date(2025, 3, 14)

FULL_BOARD_SCORES = (990, 950, 930, 900, 890, 870, 850, 820, 800, 780)


def make_entries(scores: tuple[int, ...] | list[int], first_id: int = 1) -> list[Entry]:
    """Entries with labels AAA, BBB, ... in the order given."""
    return [
        Entry(
            id=first_id + offset,
            label=chr(ord("A") + offset % 26) * 3,
            score=score,
            recorded_on=date(2024, 1, 1),
        )
        for offset, score in enumerate(scores)
    ]


class ManualTimer:
    """Stand-in for a Textual Timer."""

    def __init__(self, interval: float, callback: Callable[[], object]) -> None:
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class ManualScheduler:
    """Scheduler that only fires when a test calls ``fire``."""

    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, interval: float, callback: Callable[[], object]) -> ManualTimer:
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for timer in self.timers:
                if not timer.stopped:
                    timer.callback()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def fixed_day() -> date:
    return FIXED_DAY


@pytest.fixture
def fixed_today() -> Callable[[], date]:
    return lambda: FIXED_DAY


@pytest.fixture
def make_board() -> Callable[..., list[Entry]]:
    """Factory for boards built from a list of scores."""
    return make_entries


@pytest.fixture
def full_board() -> list[Entry]:
    """Ten entries, lowest score 780."""
    return make_entries(FULL_BOARD_SCORES)


@pytest.fixture
def empty_controller(fixed_today: Callable[[], date]) -> LeaderboardController:
    return LeaderboardController(today=fixed_today)


@pytest.fixture
def full_controller(
    full_board: list[Entry], fixed_today: Callable[[], date]
) -> LeaderboardController:
    return LeaderboardController(full_board, today=fixed_today)
