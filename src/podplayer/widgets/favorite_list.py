"""Favorites list widget grouped by show."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

if TYPE_CHECKING:
    from podplayer.models import FavoriteEpisode


class FavoriteSelected(Message):
    """Message sent when a favorite is selected for playback."""

    bubble = True

    def __init__(self, favorite: FavoriteEpisode) -> None:
        """Initialize the message.

        Args:
            favorite: The selected favorite.
        """
        self.favorite = favorite
        super().__init__()


class FavoriteList(OptionList):
    """Favorites under one disabled header row per show."""

    DEFAULT_CSS = """
    FavoriteList {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
    }

    FavoriteList:focus {
        border: solid $accent;
    }

    FavoriteList > .option-list--option-disabled {
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        """Initialize the favorites list."""
        super().__init__()
        # One slot per row; None marks a show header
        self._rows: list[FavoriteEpisode | None] = []

    @property
    def favorites(self) -> list[FavoriteEpisode]:
        """Displayed favorites in display order."""
        return [row for row in self._rows if row is not None]

    def set_groups(self, groups: dict[str, list[FavoriteEpisode]]) -> None:
        """Display favorites grouped by show.

        Args:
            groups: Favorites by show title, in display order.
        """
        self._rows = []
        self.clear_options()
        for show_title, favorites in groups.items():
            self._rows.append(None)
            self.add_option(Option(self.format_header(show_title, favorites), disabled=True))
            for favorite in favorites:
                self._rows.append(favorite)
                self.add_option(Option(self.format_favorite(favorite)))

    @staticmethod
    def format_header(show_title: str, favorites: list[FavoriteEpisode]) -> str:
        """Render a group header with episode and season counts."""
        seasons = {f.season_number for f in favorites if f.season_number is not None}
        episodes = "episode" if len(favorites) == 1 else "episodes"
        seasons_label = "season" if len(seasons) == 1 else "seasons"
        return f"{show_title} ({len(favorites)} {episodes}, {len(seasons)} {seasons_label})"

    @staticmethod
    def format_favorite(favorite: FavoriteEpisode) -> str:
        """Render one favorite with its season and episode numbers."""
        place = []
        if favorite.season_number is not None:
            place.append(f"S{favorite.season_number}")
        if favorite.episode_number is not None:
            place.append(f"E{favorite.episode_number}")
        prefix = f"{''.join(place)} " if place else ""
        added = favorite.added_at.strftime("%Y-%m-%d")
        return f"  {prefix}{favorite.title} · added {added}"

    def get_selected_favorite(self) -> FavoriteEpisode | None:
        """Get the highlighted favorite, or None on a header."""
        if self.highlighted is None or not self._rows:
            return None
        if 0 <= self.highlighted < len(self._rows):
            return self._rows[self.highlighted]
        return None

    def on_option_list_option_selected(self, _event: OptionList.OptionSelected) -> None:
        """Handle option selection."""
        favorite = self.get_selected_favorite()
        if favorite:
            self.post_message(FavoriteSelected(favorite))
