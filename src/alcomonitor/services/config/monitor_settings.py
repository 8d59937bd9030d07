"""MonitorSettings - reading interval, RNG seed and the initial board.

Settings live in a JSON file under the platform config dir. A ``.env`` file
(and the process environment) can override the scalar values.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, ClassVar

from dotenv import dotenv_values
from platformdirs import user_config_dir

from alcomonitor.services.leaderboard import Entry, InvalidSeedError
from alcomonitor.services.leaderboard.state import validate_entries
from alcomonitor.services.readings import is_valid_interval

_log = logging.getLogger(__name__)

APP_NAME = "alcomonitor"
DEFAULT_SETTINGS_PATH = Path(user_config_dir(APP_NAME)) / "settings.json"
DEFAULT_ENV_PATH = Path(".env")

ENV_READING_INTERVAL = "ALCOMONITOR_READING_INTERVAL"
ENV_RANDOM_SEED = "ALCOMONITOR_RANDOM_SEED"

DEFAULT_SEED: tuple[Entry, ...] = (
    Entry(id=1, label="AAA", score=950, recorded_on=date(2024, 1, 15)),
    Entry(id=2, label="BBB", score=890, recorded_on=date(2024, 1, 14)),
    Entry(id=3, label="CCC", score=850, recorded_on=date(2024, 1, 13)),
    Entry(id=4, label="DDD", score=820, recorded_on=date(2024, 1, 12)),
    Entry(id=5, label="EEE", score=780, recorded_on=date(2024, 1, 11)),
)

SETTINGS_LOAD_ERRORS = (
    json.JSONDecodeError,
    AttributeError,
    KeyError,
    TypeError,
    ValueError,
    InvalidSeedError,
)


@dataclass
class MonitorSettings:
    """Runtime configuration for the monitor."""

    DEFAULT_READING_INTERVAL: ClassVar[float] = 2.0

    reading_interval: float = DEFAULT_READING_INTERVAL
    random_seed: int | None = None
    seed: list[Entry] = field(default_factory=lambda: list(DEFAULT_SEED))

    def to_dict(self) -> dict[str, Any]:
        return {
            "reading_interval": self.reading_interval,
            "random_seed": self.random_seed,
            "seed": [entry.to_dict() for entry in self.seed],
        }


class MonitorSettingsManager:
    """Loads and saves MonitorSettings as JSON."""

    def __init__(
        self,
        settings_path: Path = DEFAULT_SETTINGS_PATH,
        env_path: Path | None = DEFAULT_ENV_PATH,
    ) -> None:
        self._path = settings_path
        self._env_path = env_path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> MonitorSettings:
        """Load settings from disk. Returns defaults if the file is missing or broken."""
        settings = self._load_file()
        self._apply_env_overrides(settings)
        return settings

    def save(self, settings: MonitorSettings) -> None:
        """Save settings to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(settings.to_dict(), indent=2) + "\n")

    def _load_file(self) -> MonitorSettings:
        if not self._path.exists():
            return MonitorSettings()
        try:
            data = json.loads(self._path.read_text())
            return self._parse(data)
        except SETTINGS_LOAD_ERRORS as exc:
            _log.warning("Ignoring malformed settings file %s: %s", self._path, exc)
            return MonitorSettings()

    def _parse(self, data: dict[str, Any]) -> MonitorSettings:
        defaults = MonitorSettings()
        seed = defaults.seed
        if "seed" in data:
            seed = list(validate_entries(Entry.from_dict(item) for item in data["seed"]))

        interval = float(data.get("reading_interval", defaults.reading_interval))
        if not is_valid_interval(interval):
            raise ValueError(f"reading_interval must be a positive number, got {interval}")

        random_seed = data.get("random_seed")
        return MonitorSettings(
            reading_interval=interval,
            random_seed=int(random_seed) if random_seed is not None else None,
            seed=seed,
        )

    def _read_env(self) -> dict[str, str]:
        """Merge the .env file with the process environment, environment wins."""
        values: dict[str, str] = {}
        if self._env_path is not None and self._env_path.exists():
            values.update(
                {k: v for k, v in dotenv_values(self._env_path).items() if v is not None}
            )
        for name in (ENV_READING_INTERVAL, ENV_RANDOM_SEED):
            if name in os.environ:
                values[name] = os.environ[name]
        return values

    def _apply_env_overrides(self, settings: MonitorSettings) -> None:
        env_vars = self._read_env()

        if raw_interval := env_vars.get(ENV_READING_INTERVAL):
            try:
                interval = float(raw_interval)
            except ValueError:
                interval = 0.0
            if is_valid_interval(interval):
                settings.reading_interval = interval
            else:
                _log.warning("Ignoring %s=%r: not a positive number", ENV_READING_INTERVAL, raw_interval)

        if raw_seed := env_vars.get(ENV_RANDOM_SEED):
            try:
                settings.random_seed = int(raw_seed)
            except ValueError:
                _log.warning("Ignoring %s=%r: not an integer", ENV_RANDOM_SEED, raw_seed)
