"""Reading services: sensor sources and the interval ticker."""

from alcomonitor.services.readings.source import (
    RandomReadingSource,
    ReadingSource,
    ScriptedReadingSource,
    SensorReadingSource,
    clamp_reading,
    ppm_from_ratio,
)
from alcomonitor.services.readings.ticker import (
    DEFAULT_INTERVAL,
    ReadingTicker,
    Scheduler,
    is_valid_interval,
)

__all__ = [
    "DEFAULT_INTERVAL",
    "RandomReadingSource",
    "ReadingSource",
    "ReadingTicker",
    "Scheduler",
    "ScriptedReadingSource",
    "SensorReadingSource",
    "clamp_reading",
    "is_valid_interval",
    "ppm_from_ratio",
]
