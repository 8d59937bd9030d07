"""ScoreTable widget - the ranked highscore list."""

from rich.text import Text
from textual.widgets import DataTable

from alcomonitor.services.leaderboard import Entry

PODIUM_BADGES = ("🥇", "🥈", "🥉")
PODIUM_ROW_STYLE = "bold #F1FA8C"
NEW_ROW_STYLE = "bold #50FA7B"

SCORE_STYLES: tuple[tuple[int, str], ...] = (
    (900, "#FF5555"),
    (700, "#FFB86C"),
    (500, "#F1FA8C"),
    (0, "#50FA7B"),
)


def rank_badge(index: int) -> str:
    """Medal for the podium, ``#n`` for everyone else (``index`` is 0-based)."""
    if index < len(PODIUM_BADGES):
        return PODIUM_BADGES[index]
    return f"#{index + 1}"


def score_style(score: int) -> str:
    for lower, style in SCORE_STYLES:
        if score >= lower:
            return style
    return SCORE_STYLES[-1][1]


class ScoreTable(DataTable):
    """Read-only table of leaderboard entries in rank order."""

    DEFAULT_CSS = """
    ScoreTable {
        height: auto;
        max-height: 14;
    }
    """

    def on_mount(self) -> None:
        self.cursor_type = "row"
        self.zebra_stripes = True
        self._ensure_columns()

    def _ensure_columns(self) -> None:
        if self.columns:
            return
        self.add_column("#", key="rank", width=4)
        self.add_column("Name", key="label", width=6)
        self.add_column("ppm", key="score", width=6)
        self.add_column("Date", key="date", width=12)

    def show_entries(self, entries: tuple[Entry, ...], highlight_id: int | None = None) -> None:
        """Replace the rows with ``entries``, highlighting ``highlight_id`` if present."""
        self._ensure_columns()
        self.clear()
        for index, entry in enumerate(entries):
            cells = [
                Text(rank_badge(index)),
                Text(entry.label, style="bold"),
                Text(str(entry.score), style=score_style(entry.score)),
                Text(entry.recorded_on.isoformat(), style="dim"),
            ]
            if entry.id == highlight_id:
                cells = [Text(cell.plain, style=NEW_ROW_STYLE) for cell in cells]
            elif index < len(PODIUM_BADGES):
                cells[1].stylize(PODIUM_ROW_STYLE)
            self.add_row(*cells, key=str(entry.id))
