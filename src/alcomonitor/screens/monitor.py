"""Monitor screen - live reading on top, highscores underneath.

Layout:
+---------------------------------------------+
|        ESP32-C3 Alcohol Monitor             |
+---------------------------------------------+
|  Current Reading   734 ppm                  |
|            [ Register Score! ]              |
+---------------------------------------------+
|  High Scores                                |
|  🥇 AAA   950   2024-01-15                   |
|  🥈 BBB   890   2024-01-14                   |
|  ...                                        |
+---------------------------------------------+
"""

from collections.abc import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Footer, Static

from alcomonitor.modals import NameEntryModal
from alcomonitor.services.leaderboard import (
    Entry,
    LeaderboardController,
    LeaderboardError,
)
from alcomonitor.services.readings import ReadingSource, ReadingTicker
from alcomonitor.widgets import ReadingPanel, ScoreTable

EMPTY_BOARD_TEXT = (
    "[bold]No high scores yet![/bold]\n[dim]Be the first to register a score.[/dim]"
)


class MonitorScreen(Screen):
    """Single-screen dashboard for readings and highscores."""

    DEFAULT_CSS = """
    MonitorScreen {
        #title {
            width: 100%;
            text-align: center;
            text-style: bold;
            color: #F1FA8C;
            padding: 1 0;
        }

        #scores-heading {
            text-style: bold;
            padding: 1 0 0 1;
        }

        #empty-board {
            width: 100%;
            text-align: center;
            padding: 1 0;
            display: none;
        }

        &.-empty #empty-board {
            display: block;
        }

        &.-empty ScoreTable {
            display: none;
        }

        #footer-note {
            width: 100%;
            text-align: center;
            color: $text-muted;
        }
    }
    """

    BINDINGS = [
        Binding("r", "register", "Register"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(
        self,
        controller: LeaderboardController,
        source: ReadingSource,
        interval: float,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._ticker = ReadingTicker(source, interval, on_reading=self._on_reading)
        self._last_entry_id: int | None = None

    @property
    def controller(self) -> LeaderboardController:
        return self._controller

    @property
    def ticker(self) -> ReadingTicker:
        return self._ticker

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static("⚡ ESP32-C3 Alcohol Monitor ⚡", id="title")
            yield ReadingPanel(id="reading-panel")
            yield Static("🏆 High Scores", id="scores-heading")
            yield ScoreTable(id="score-table")
            yield Static(EMPTY_BOARD_TEXT, id="empty-board")
            yield Static(
                f"Readings update every {self._ticker.interval:g} seconds",
                id="footer-note",
            )
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_reading()
        self._refresh_board()
        self._ticker.start(self._schedule)

    def on_unmount(self) -> None:
        self._ticker.stop()

    def _schedule(self, interval: float, callback: Callable[[], object]) -> Timer:
        return self.set_interval(interval, callback)

    def _on_reading(self, reading: int) -> None:
        self._refresh_reading()

    def _refresh_reading(self) -> None:
        panel = self.query_one("#reading-panel", ReadingPanel)
        reading = self._ticker.latest
        panel.reading = reading
        panel.qualifying = self._controller.is_qualifying(reading)

    def _refresh_board(self) -> None:
        entries = self._controller.entries
        self.set_class(not entries, "-empty")
        self.query_one("#score-table", ScoreTable).show_entries(
            entries, highlight_id=self._last_entry_id
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "register-btn":
            event.stop()
            self.action_register()

    def action_register(self) -> None:
        """Stage the reading shown right now and ask for a name."""
        if isinstance(self.app.screen, NameEntryModal):
            return
        try:
            self._controller.begin_registration(self._ticker.latest)
        except LeaderboardError as exc:
            self.notify(str(exc), title="Not Top 10", severity="warning")
            return
        self.app.push_screen(
            NameEntryModal(self._controller),
            callback=self._on_registration_closed,
        )

    def _on_registration_closed(self, entry: Entry | None) -> None:
        if entry is None:
            self._refresh_reading()
            return

        rank = self._controller.rank_of(entry.id)
        self._last_entry_id = entry.id
        self._refresh_board()
        self._refresh_reading()

        # Unreachable while begin_registration refuses ties at the floor.
        if rank is None:
            self.notify(
                f"{entry.label} tied the lowest score and did not make the board",
                severity="warning",
            )
        else:
            self.notify(f"{entry.label} registered at #{rank} with {entry.score} ppm")
