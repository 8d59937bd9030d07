"""ReadingTicker - pulls a reading on a fixed interval and keeps the latest.

The ticker does not own a clock. It is handed a scheduler, which in the app
is Textual's ``set_interval`` and in tests is a manual stand-in, so readings
can be driven deterministically.
"""

import logging
import math
from collections.abc import Callable
from typing import Protocol

from alcomonitor.services.readings.source import ReadingSource

_log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 2.0


def is_valid_interval(interval: float) -> bool:
    """True for a finite, strictly positive number of seconds."""
    return math.isfinite(interval) and interval > 0


class TimerHandle(Protocol):
    def stop(self) -> object: ...


class Scheduler(Protocol):
    def __call__(self, interval: float, callback: Callable[[], object]) -> TimerHandle: ...


class ReadingTicker:
    """Emits one reading per interval with last-value-wins semantics.

    Nothing is queued: a reading nobody looked at is simply replaced by the
    next one.
    """

    def __init__(
        self,
        source: ReadingSource,
        interval: float = DEFAULT_INTERVAL,
        on_reading: Callable[[int], None] | None = None,
    ) -> None:
        if not is_valid_interval(interval):
            raise ValueError(f"Reading interval must be a positive number, got {interval}")
        self._source = source
        self._interval = interval
        self._on_reading = on_reading
        self._latest = 0
        self._timer: TimerHandle | None = None

    @property
    def latest(self) -> int:
        return self._latest

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def tick(self) -> int:
        """Pull one reading, store it and notify the listener."""
        self._latest = self._source.next_reading()
        if self._on_reading is not None:
            self._on_reading(self._latest)
        return self._latest

    def start(self, scheduler: Scheduler) -> None:
        if self._timer is not None:
            raise RuntimeError("ReadingTicker is already running")
        self._timer = scheduler(self._interval, self.tick)
        _log.debug("Reading ticker started every %.2fs", self._interval)

    def stop(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer = None
        _log.debug("Reading ticker stopped at %d", self._latest)
