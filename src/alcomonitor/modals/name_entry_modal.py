"""NameEntryModal - confirm a pending highscore with a three-letter name.

The modal drives the controller directly so a rejected name keeps the
pending score in place and the user can simply try again:

- Submit with a valid name  -> commit, dismiss with the new Entry
- Submit with a bad name    -> error shown, modal stays open
- Cancel / Escape           -> registration cancelled, dismiss with None
"""

from typing import ClassVar

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from alcomonitor.services.leaderboard import (
    LABEL_LENGTH,
    Entry,
    InvalidLabelError,
    LeaderboardController,
    LeaderboardError,
)


class NameEntryModal(ModalScreen[Entry | None]):
    """Modal asking for the name to record a pending score under.

    Returns the committed Entry, or None on cancel.
    """

    DEFAULT_CSS = """
    NameEntryModal {
        align: center middle;
        background: black 50%;

        #container {
            width: 44;
            height: auto;
            padding: 1 2;
            border: thick $primary;
            background: $surface;
        }

        .modal-title {
            width: 100%;
            text-align: center;
            text-style: bold;
        }

        #pending-score {
            width: 100%;
            text-align: center;
            margin: 1 0;
        }

        #name-input {
            text-style: bold;
        }

        #error-text {
            color: $error;
            display: none;
        }

        #error-text.-visible {
            display: block;
        }

        #buttons {
            height: auto;
            margin-top: 1;
            align: center middle;
        }

        #buttons Button {
            width: 1fr;
            margin: 0 1;
        }
    }
    """

    AUTO_FOCUS = "#name-input"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, controller: LeaderboardController) -> None:
        super().__init__()
        self._controller = controller

    def compose(self) -> ComposeResult:
        pending = self._controller.pending
        score = pending.score if pending is not None else 0

        with Vertical(id="container"):
            yield Static("New High Score!", classes="modal-title")
            yield Static(f"Score: [bold]{score}[/bold] ppm", id="pending-score")
            yield Label(f"Enter your name ({LABEL_LENGTH} characters):")
            yield Input(
                placeholder="AAA",
                max_length=LABEL_LENGTH,
                id="name-input",
            )
            yield Static("", id="error-text")
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="cancel-btn", variant="default")
                yield Button("Submit", id="submit-btn", variant="primary", disabled=True)

    @on(Input.Changed, "#name-input")
    def _on_name_changed(self, event: Input.Changed) -> None:
        self.query_one("#submit-btn", Button).disabled = (
            len(event.value.strip()) != LABEL_LENGTH
        )
        self.query_one("#error-text").remove_class("-visible")

    @on(Input.Submitted, "#name-input")
    def _on_name_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        match event.button.id:
            case "cancel-btn":
                self.action_cancel()
            case "submit-btn":
                self._submit(self.query_one("#name-input", Input).value)

    def _submit(self, name: str) -> None:
        try:
            entry = self._controller.commit(name)
        except InvalidLabelError as exc:
            self._show_error(str(exc))
            return
        except LeaderboardError as exc:
            # Pending slot vanished underneath us; nothing left to name.
            self.notify(str(exc), severity="warning")
            self.dismiss(None)
            return
        self.dismiss(entry)

    def _show_error(self, message: str) -> None:
        error = self.query_one("#error-text", Static)
        error.update(escape(message))
        error.add_class("-visible")
        self.query_one("#name-input", Input).focus()

    def action_cancel(self) -> None:
        self._controller.cancel_registration()
        self.dismiss(None)
