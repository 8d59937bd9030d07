"""ReadingPanel widget - live ppm value with the register action.

Layout:
+-------------------------------+
|        Current Reading        |
|            734  ppm           |
|       [ Register Score! ]     |
+-------------------------------+
"""

from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Digits, Label, Static

# (lower bound, CSS class) checked top-down
SCORE_BANDS: tuple[tuple[int, str], ...] = (
    (900, "-danger"),
    (700, "-high"),
    (500, "-elevated"),
    (0, "-low"),
)

REGISTER_LABEL = "Register Score!"
NOT_TOP_LABEL = "Not Top 10"


def score_band(score: int) -> str:
    """CSS class for the colour band a score falls in."""
    for lower, css_class in SCORE_BANDS:
        if score >= lower:
            return css_class
    return SCORE_BANDS[-1][1]


class ReadingPanel(Vertical):
    """Shows the latest reading and whether it can be registered."""

    DEFAULT_CSS = """
    ReadingPanel {
        height: auto;
        padding: 1 2;
        border: round $primary;

        #reading-title {
            width: 100%;
            text-align: center;
            text-style: bold;
        }

        #reading-row {
            height: auto;
            align: center middle;
        }

        #reading-value {
            width: auto;
        }

        #reading-unit {
            color: $text-muted;
            padding: 2 0 0 1;
        }

        #reading-value.-low { color: #50FA7B; }
        #reading-value.-elevated { color: #F1FA8C; }
        #reading-value.-high { color: #FFB86C; }
        #reading-value.-danger { color: #FF5555; }

        #register-btn {
            margin-top: 1;
        }
    }
    """

    reading: reactive[int] = reactive(0)
    qualifying: reactive[bool] = reactive(True)

    def compose(self) -> ComposeResult:
        yield Static("Current Reading", id="reading-title")
        with Horizontal(id="reading-row"):
            yield Digits("0", id="reading-value", classes="-low")
            yield Label("ppm", id="reading-unit")
        with Center():
            yield Button(REGISTER_LABEL, id="register-btn", variant="success")

    def on_mount(self) -> None:
        self._show_reading(self.reading)
        self._show_qualifying(self.qualifying)

    def watch_reading(self, reading: int) -> None:
        if self.is_mounted:
            self._show_reading(reading)

    def watch_qualifying(self, qualifying: bool) -> None:
        if self.is_mounted:
            self._show_qualifying(qualifying)

    def _show_reading(self, reading: int) -> None:
        digits = self.query_one("#reading-value", Digits)
        digits.update(str(reading))
        for _, css_class in SCORE_BANDS:
            digits.remove_class(css_class)
        digits.add_class(score_band(reading))

    def _show_qualifying(self, qualifying: bool) -> None:
        button = self.query_one("#register-btn", Button)
        button.disabled = not qualifying
        button.label = REGISTER_LABEL if qualifying else NOT_TOP_LABEL
        button.variant = "success" if qualifying else "default"
