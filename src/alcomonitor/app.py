"""Alcomonitor - Textual app showing live alcohol readings and highscores.

This is the main application entry point. It wires configuration, the
reading source and the leaderboard controller into the monitor screen.
"""

import argparse
import json
import logging
import random
import sys
from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.reactive import var

from alcomonitor import __version__
from alcomonitor.screens import MonitorScreen
from alcomonitor.services.config import MonitorSettings, MonitorSettingsManager
from alcomonitor.services.leaderboard import InvalidSeedError, LeaderboardController
from alcomonitor.services.readings import (
    RandomReadingSource,
    ReadingSource,
    ScriptedReadingSource,
    is_valid_interval,
)

_log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AlcoMonitorApp(App):
    """Main application - a single monitor screen plus the name-entry modal."""

    CSS_PATH = "styles/main.tcss"
    TITLE = f"Alcomonitor v{__version__}"
    ENABLE_COMMAND_PALETTE = False

    terminal_title: var[str] = var("Alcomonitor")

    BINDINGS = [
        Binding("f1", "toggle_help", "Help"),
    ]

    def __init__(
        self,
        settings: MonitorSettings | None = None,
        source: ReadingSource | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__()
        self._monitor_settings = settings or MonitorSettings()
        if not is_valid_interval(self._monitor_settings.reading_interval):
            raise ValueError(
                f"Reading interval must be a positive number, "
                f"got {self._monitor_settings.reading_interval}"
            )
        self._reading_source = source or RandomReadingSource(
            random.Random(self._monitor_settings.random_seed)
        )
        self._leaderboard = LeaderboardController(self._monitor_settings.seed, today=today)

    @property
    def controller(self) -> LeaderboardController:
        return self._leaderboard

    def on_mount(self) -> None:
        self.push_screen(
            MonitorScreen(
                self._leaderboard,
                self._reading_source,
                self._monitor_settings.reading_interval,
            )
        )
        self.call_later(self._update_terminal_title)

    def watch_terminal_title(self, title: str) -> None:
        self._update_terminal_title()

    def _update_terminal_title(self) -> None:
        """Write terminal title via driver (only when ready)."""
        if driver := self._driver:
            driver.write(f"\033]0;🍺 {self.terminal_title}\007")

    def action_toggle_help(self) -> None:
        self.notify(
            "R / click: Register the current reading\n"
            "Enter: Submit name\n"
            "Escape: Cancel registration\n"
            "Q: Quit",
            title="Keyboard Shortcuts",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alcomonitor",
        description="Live alcohol sensor readings with a top-10 highscore board",
    )
    parser.add_argument("--settings", type=Path, help="Settings JSON file to load")
    parser.add_argument("--interval", type=float, help="Seconds between readings")
    parser.add_argument(
        "--empty", action="store_true", help="Start with an empty highscore board"
    )
    parser.add_argument(
        "--script",
        type=parse_script,
        help="Comma-separated readings to replay instead of random values",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Print the initial board as JSON and exit",
    )
    parser.add_argument("--log-file", type=Path, help="Write logs to this file")
    return parser


def parse_script(raw: str) -> list[int]:
    try:
        values = [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid reading script {raw!r}") from exc
    if not values:
        raise argparse.ArgumentTypeError("reading script is empty")
    return values


def resolve_settings(args: argparse.Namespace) -> MonitorSettings:
    """Load settings, then let command-line flags override them."""
    manager = MonitorSettingsManager(args.settings) if args.settings else MonitorSettingsManager()
    settings = manager.load()
    if args.interval is not None:
        if not is_valid_interval(args.interval):
            raise ValueError(f"--interval must be a positive number, got {args.interval}")
        settings.reading_interval = args.interval
    if args.empty:
        settings.seed = []
    return settings


def configure_logging(log_file: Path | None) -> None:
    # Textual owns the terminal, so logs only go somewhere when asked to.
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=logging.INFO, format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)

    try:
        settings = resolve_settings(args)
    except ValueError as exc:
        parser.error(str(exc))

    source = ScriptedReadingSource(args.script) if args.script else None
    try:
        app = AlcoMonitorApp(settings=settings, source=source)
    except InvalidSeedError as exc:
        parser.error(f"invalid highscore seed: {exc}")

    if args.export:
        json.dump(app.controller.export_records(), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    _log.info("Starting monitor with %d seeded entries", len(settings.seed))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
