"""Reading sources: where the ppm value shown on screen comes from."""

import math
import random
import sys
from collections.abc import Callable, Iterable
from typing import Protocol

from alcomonitor.services.leaderboard.models import MAX_READING, MIN_READING

# MQ-303A datasheet curve: log10(ppm) = (log10(Rs/R0) - 0.328) / -0.55
CURVE_INTERCEPT = 0.328
CURVE_SLOPE = -0.55


class ReadingSource(Protocol):
    def next_reading(self) -> int: ...


def clamp_reading(value: float) -> int:
    """Round ``value`` and clamp it into the reading domain."""
    if math.isnan(value):
        return MIN_READING
    if math.isinf(value):
        return MAX_READING - 1 if value > 0 else MIN_READING
    return max(MIN_READING, min(MAX_READING - 1, round(value)))


def ppm_from_ratio(ratio: float) -> float:
    """Convert an Rs(gas)/Rs(air) resistance ratio into alcohol ppm."""
    if ratio <= 0:
        raise ValueError(f"Resistance ratio must be positive, got {ratio}")
    exponent = (math.log10(ratio) - CURVE_INTERCEPT) / CURVE_SLOPE
    if exponent > sys.float_info.max_10_exp:
        return math.inf
    return 10**exponent


class RandomReadingSource:
    """Uniform random readings, the stand-in for a real sensor."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_reading(self) -> int:
        return self._rng.randrange(MIN_READING, MAX_READING)


class ScriptedReadingSource:
    """Replays fixed readings, then keeps repeating the last one."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = [clamp_reading(v) for v in values]
        if not self._values:
            raise ValueError("ScriptedReadingSource needs at least one value")
        self._position = 0

    def next_reading(self) -> int:
        value = self._values[self._position]
        if self._position < len(self._values) - 1:
            self._position += 1
        return value


class SensorReadingSource:
    """Reads a resistance ratio from a sensor callback and reports ppm."""

    def __init__(self, read_ratio: Callable[[], float]) -> None:
        self._read_ratio = read_ratio

    def next_reading(self) -> int:
        return clamp_reading(ppm_from_ratio(self._read_ratio()))
