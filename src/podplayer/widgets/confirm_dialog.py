"""Confirmation dialog widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Literal

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ConfirmDialog(ModalScreen[bool]):
    """Ask a yes/no question before a destructive action.

    Dismisses with True when confirmed.
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("escape", "answer(False)", "Cancel"),
        Binding("n", "answer(False)", "No", show=False),
        Binding("y", "answer(True)", "Yes", show=False),
    ]

    DEFAULT_CSS = """
    ConfirmDialog {
        align: center middle;
    }

    ConfirmDialog > Vertical {
        width: 56;
        height: auto;
        background: $surface;
        border: thick $warning;
        padding: 1 2;
    }

    ConfirmDialog #confirm-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }

    ConfirmDialog #confirm-message {
        width: 100%;
        text-align: center;
        padding: 1 0;
    }

    ConfirmDialog Horizontal {
        height: auto;
        align: center middle;
    }

    ConfirmDialog Button {
        margin: 0 1;
    }
    """

    def __init__(
        self,
        message: str,
        *,
        title: str = "Are you sure?",
        confirm_label: str = "Yes",
        cancel_label: str = "Cancel",
        variant: Literal["warning", "error", "primary"] = "warning",
    ) -> None:
        """Initialize the dialog.

        Args:
            message: Question shown to the user.
            title: Heading above the question.
            confirm_label: Label of the confirming button.
            cancel_label: Label of the cancelling button.
            variant: Button variant of the confirming button.
        """
        super().__init__()
        self._message = message
        self._title = title
        self._confirm_label = confirm_label
        self._cancel_label = cancel_label
        self._variant = variant

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical():
            yield Static(self._title, id="confirm-title")
            yield Static(self._message, id="confirm-message")
            with Horizontal():
                yield Button(self._confirm_label, variant=self._variant, id="confirm")
                yield Button(self._cancel_label, id="cancel")

    def on_mount(self) -> None:
        """Focus the safe choice."""
        self.query_one("#cancel", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dismiss with the answer of the pressed button."""
        event.stop()
        self.dismiss(event.button.id == "confirm")

    def action_answer(self, confirmed: bool) -> None:
        """Dismiss with the given answer."""
        self.dismiss(confirmed)
