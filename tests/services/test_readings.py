"""Tests for reading sources and the interval ticker."""

import math
import random

import pytest

from alcomonitor.services.readings import (
    RandomReadingSource,
    ReadingTicker,
    ScriptedReadingSource,
    SensorReadingSource,
    clamp_reading,
    ppm_from_ratio,
)


class TestClampReading:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param(-5.0, 0, id="negative"),
            pytest.param(12.4, 12, id="rounds_down"),
            pytest.param(12.6, 13, id="rounds_up"),
            pytest.param(999.4, 999, id="top_of_range"),
            pytest.param(5000.0, 999, id="above_range"),
            pytest.param(math.inf, 999, id="infinite"),
            pytest.param(math.nan, 0, id="nan"),
        ],
    )
    def test_clamp(self, value: float, expected: int) -> None:
        assert clamp_reading(value) == expected


class TestPpmFromRatio:
    def test_reference_point(self) -> None:
        """At log10(ratio) == 0.328 the curve crosses 1 ppm."""
        assert ppm_from_ratio(10**0.328) == pytest.approx(1.0)

    def test_lower_ratio_means_more_alcohol(self) -> None:
        assert ppm_from_ratio(0.1) > ppm_from_ratio(0.5) > ppm_from_ratio(1.0)

    @pytest.mark.parametrize("ratio", [0.0, -1.0])
    def test_non_positive_ratio_rejected(self, ratio: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            ppm_from_ratio(ratio)

    def test_tiny_ratio_does_not_overflow(self) -> None:
        assert ppm_from_ratio(1e-300) == math.inf


class TestSources:
    def test_random_source_stays_in_range(self) -> None:
        source = RandomReadingSource(random.Random(7))
        readings = [source.next_reading() for _ in range(500)]
        assert all(0 <= r < 1000 for r in readings)

    def test_random_source_is_reproducible_with_seeded_rng(self) -> None:
        first = RandomReadingSource(random.Random(3))
        second = RandomReadingSource(random.Random(3))
        assert [first.next_reading() for _ in range(5)] == [
            second.next_reading() for _ in range(5)
        ]

    def test_scripted_source_repeats_last_value(self) -> None:
        source = ScriptedReadingSource([100, 200])
        assert [source.next_reading() for _ in range(4)] == [100, 200, 200, 200]

    def test_scripted_source_clamps_values(self) -> None:
        source = ScriptedReadingSource([-3, 4000])
        assert [source.next_reading() for _ in range(2)] == [0, 999]

    def test_scripted_source_needs_values(self) -> None:
        with pytest.raises(ValueError):
            ScriptedReadingSource([])

    def test_sensor_source_converts_ratio(self) -> None:
        source = SensorReadingSource(lambda: 10**0.328)
        assert source.next_reading() == 1

    def test_sensor_source_clamps_saturated_reading(self) -> None:
        source = SensorReadingSource(lambda: 0.001)
        assert source.next_reading() == 999


class TestReadingTicker:
    def test_latest_starts_at_zero(self) -> None:
        ticker = ReadingTicker(ScriptedReadingSource([42]))
        assert ticker.latest == 0

    def test_tick_updates_latest_and_notifies(self) -> None:
        seen: list[int] = []
        ticker = ReadingTicker(ScriptedReadingSource([5, 6]), on_reading=seen.append)

        assert ticker.tick() == 5
        assert ticker.tick() == 6
        assert ticker.latest == 6
        assert seen == [5, 6]

    def test_last_value_wins(self, manual_scheduler) -> None:
        ticker = ReadingTicker(ScriptedReadingSource([10, 20, 30]), interval=2.0)
        ticker.start(manual_scheduler)

        manual_scheduler.fire(times=3)

        assert ticker.latest == 30
        assert manual_scheduler.timers[0].interval == 2.0

    def test_start_twice_raises(self, manual_scheduler) -> None:
        ticker = ReadingTicker(ScriptedReadingSource([1]))
        ticker.start(manual_scheduler)
        with pytest.raises(RuntimeError):
            ticker.start(manual_scheduler)

    def test_stop_halts_emissions_and_is_idempotent(self, manual_scheduler) -> None:
        ticker = ReadingTicker(ScriptedReadingSource([1, 2, 3]))
        ticker.start(manual_scheduler)
        manual_scheduler.fire()

        ticker.stop()
        ticker.stop()
        manual_scheduler.fire(times=2)

        assert ticker.latest == 1
        assert ticker.is_running is False
        assert manual_scheduler.timers[0].stopped is True

    @pytest.mark.parametrize("interval", [0, -1.5, math.nan, math.inf])
    def test_rejects_non_positive_interval(self, interval: float) -> None:
        with pytest.raises(ValueError):
            ReadingTicker(ScriptedReadingSource([1]), interval=interval)
