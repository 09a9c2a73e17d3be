"""Settings screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from podplayer.config import get_config_path
from podplayer.widgets.confirm_dialog import ConfirmDialog

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from podplayer.app import PodplayerApp


class SettingsScreen(ModalScreen[None]):
    """Theme choice and listening history reset."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("escape", "close", "Close"),
    ]

    DEFAULT_CSS = """
    SettingsScreen {
        align: center middle;
    }

    SettingsScreen > Vertical {
        width: 64;
        max-width: 90%;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    SettingsScreen .settings-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
        border-bottom: solid $primary;
        margin-bottom: 1;
    }

    SettingsScreen .setting-row {
        height: auto;
        margin-bottom: 1;
    }

    SettingsScreen .setting-label {
        width: 20;
        padding: 1 1 0 0;
    }

    SettingsScreen .settings-hint {
        color: $text-muted;
    }

    SettingsScreen .button-row {
        height: auto;
        padding-top: 1;
        border-top: solid $primary;
        align: center middle;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the settings screen."""
        app: PodplayerApp = self.app  # type: ignore[assignment]
        with Vertical():
            yield Static("Settings", classes="settings-title")
            with Horizontal(classes="setting-row"):
                yield Label("Theme:", classes="setting-label")
                yield Button(self._theme_label(), id="theme-btn")
            with Horizontal(classes="setting-row"):
                yield Label("Listening history:", classes="setting-label")
                yield Button("Reset", variant="error", id="reset-btn")
            yield Static(
                f"Player backend: {app.config.player.backend}. "
                f"Other options live in {get_config_path()}",
                classes="settings-hint",
            )
            with Horizontal(classes="button-row"):
                yield Button("Close", variant="primary", id="close-btn")

    def _theme_label(self) -> str:
        return "Dark" if self.app.theme == "textual-dark" else "Light"

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "theme-btn":
            app: PodplayerApp = self.app  # type: ignore[assignment]
            await app.action_toggle_theme()
            event.button.label = self._theme_label()
        elif event.button.id == "reset-btn":
            self.action_reset_history()
        elif event.button.id == "close-btn":
            self.dismiss()

    def action_reset_history(self) -> None:
        """Ask before forgetting the progress of every episode."""
        self.app.push_screen(
            ConfirmDialog(
                "Forget the listening progress of every episode?",
                title="Reset Listening History",
                confirm_label="Reset",
                variant="error",
            ),
            self._reset_history,
        )

    async def _reset_history(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        app: PodplayerApp = self.app  # type: ignore[assignment]
        await app.progress.reset_all()
        self.notify("Listening history reset")

    def action_close(self) -> None:
        """Close the settings screen."""
        self.dismiss()
