"""Show list widget for the catalog directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from podplayer.catalog import genre_names

if TYPE_CHECKING:
    from podplayer.models import ShowPreview


class ShowSelected(Message):
    """Message sent when a show is selected."""

    bubble = True

    def __init__(self, show: ShowPreview) -> None:
        """Initialize the message.

        Args:
            show: The selected show.
        """
        self.show = show
        super().__init__()


class ShowList(OptionList):
    """Navigable list of catalog shows."""

    DEFAULT_CSS = """
    ShowList {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
    }

    ShowList:focus {
        border: solid $accent;
    }

    ShowList > .option-list--option-highlighted {
        background: $accent;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        """Initialize the show list.

        Args:
            id: Widget id.
        """
        super().__init__(id=id)
        self._shows: list[ShowPreview] = []

    @property
    def shows(self) -> list[ShowPreview]:
        """Shows currently displayed."""
        return self._shows

    def set_shows(self, shows: list[ShowPreview]) -> None:
        """Set the shows to display.

        Args:
            shows: Shows in display order.
        """
        self._shows = shows
        self.clear_options()
        for show in shows:
            self.add_option(Option(self.format_show(show)))

    @staticmethod
    def format_show(show: ShowPreview) -> str:
        """Render one row: title, season count and genres."""
        seasons = "season" if show.seasons == 1 else "seasons"
        parts = [show.title, f"{show.seasons} {seasons}"]
        genres = genre_names(show.genres)
        if genres:
            parts.append(", ".join(genres))
        return " · ".join(parts)

    def get_selected_show(self) -> ShowPreview | None:
        """Get the highlighted show.

        Returns:
            The selected ShowPreview or None.
        """
        if self.highlighted is None or not self._shows:
            return None
        if 0 <= self.highlighted < len(self._shows):
            return self._shows[self.highlighted]
        return None

    def on_option_list_option_selected(self, _event: OptionList.OptionSelected) -> None:
        """Handle option selection (Enter key or click)."""
        show = self.get_selected_show()
        if show:
            self.post_message(ShowSelected(show))
