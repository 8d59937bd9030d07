"""Config services for monitor settings."""

from alcomonitor.services.config.monitor_settings import (
    DEFAULT_SEED,
    ENV_RANDOM_SEED,
    ENV_READING_INTERVAL,
    MonitorSettings,
    MonitorSettingsManager,
)

__all__ = [
    "DEFAULT_SEED",
    "ENV_RANDOM_SEED",
    "ENV_READING_INTERVAL",
    "MonitorSettings",
    "MonitorSettingsManager",
]
