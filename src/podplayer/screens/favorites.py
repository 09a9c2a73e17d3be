"""Favorites screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from podplayer.catalog import FavoriteSort, arrange_favorites, favorite_genres
from podplayer.models import PlayRequest
from podplayer.widgets.favorite_list import FavoriteList, FavoriteSelected
from podplayer.widgets.player_bar import PlayerBar

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from podplayer.app import PodplayerApp
    from podplayer.models import FavoriteEpisode


class FavoritesScreen(Screen[None]):
    """Favorite episodes grouped by show, with sort and genre filters."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("escape", "back", "Back"),
        Binding("o", "cycle_sort", "Sort"),
        Binding("g", "cycle_genre", "Genre"),
        Binding("r", "reset_filters", "Reset Filters"),
        Binding("d", "remove", "Remove"),
    ]

    DEFAULT_CSS = """
    FavoritesScreen #favorites-status {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }

    FavoritesScreen #favorites-empty {
        padding: 1 2;
        display: none;
    }

    FavoritesScreen.empty #favorites-empty {
        display: block;
    }

    FavoritesScreen.empty FavoriteList {
        display: none;
    }
    """

    def __init__(self) -> None:
        """Initialize the favorites screen."""
        super().__init__()
        self._favorites: list[FavoriteEpisode] = []
        self._sort = FavoriteSort.TITLE_AZ
        self._genre = ""

    @property
    def sort(self) -> FavoriteSort:
        """Current sort order."""
        return self._sort

    @property
    def genre(self) -> str:
        """Current genre filter; empty for all genres."""
        return self._genre

    def compose(self) -> ComposeResult:
        """Compose the favorites screen layout."""
        yield Header()
        yield Static("", id="favorites-status")
        yield Static(
            "No favorites yet. Press f on an episode to add it.", id="favorites-empty"
        )
        yield FavoriteList()
        yield PlayerBar()
        yield Footer()

    async def on_screen_resume(self) -> None:
        """Reload favorites whenever the screen is shown."""
        await self.load_favorites()

    async def load_favorites(self) -> None:
        """Read the favorites collection and redraw."""
        app: PodplayerApp = self.app  # type: ignore[assignment]
        self._favorites = await app.favorites.all()
        self._redraw()

    def _redraw(self) -> None:
        groups = arrange_favorites(self._favorites, self._sort, self._genre)
        favorite_list = self.query_one(FavoriteList)
        favorite_list.set_groups(groups)
        shown = len(favorite_list.favorites)
        self.set_class(not self._favorites, "empty")

        parts = [f"{shown} of {len(self._favorites)} favorites", f"Sort: {self._sort.label}"]
        if self._genre:
            parts.append(f"Genre: {self._genre}")
        self.query_one("#favorites-status", Static).update(" · ".join(parts))

    def action_cycle_sort(self) -> None:
        """Cycle through the sort orders."""
        sorts = list(FavoriteSort)
        self._sort = sorts[(sorts.index(self._sort) + 1) % len(sorts)]
        self._redraw()

    def action_cycle_genre(self) -> None:
        """Cycle the genre filter through the genres of the favorites."""
        genres = ["", *favorite_genres(self._favorites)]
        current = genres.index(self._genre) if self._genre in genres else 0
        self._genre = genres[(current + 1) % len(genres)]
        self._redraw()

    def action_reset_filters(self) -> None:
        """Restore the default sort and genre."""
        self._sort = FavoriteSort.TITLE_AZ
        self._genre = ""
        self._redraw()

    async def action_remove(self) -> None:
        """Remove the highlighted favorite."""
        favorite = self.query_one(FavoriteList).get_selected_favorite()
        if favorite is None:
            self.notify("No favorite selected", severity="warning")
            return

        app: PodplayerApp = self.app  # type: ignore[assignment]
        await app.favorites.remove(favorite.id)
        await self.load_favorites()
        self.notify(f"Removed from favorites: {favorite.title}")

    async def on_favorite_selected(self, event: FavoriteSelected) -> None:
        """Play a favorite with the displayed favorites as queue."""
        if not event.favorite.file:
            self.notify("No audio available for this episode", severity="warning")
            return

        app: PodplayerApp = self.app  # type: ignore[assignment]
        queue = tuple(f.to_queue_entry() for f in self.query_one(FavoriteList).favorites)
        await app.bus.publish(PlayRequest.from_entry(event.favorite.to_queue_entry(), queue))
        self.notify(f"Playing: {event.favorite.title}")

    def action_back(self) -> None:
        """Go back to the previous screen."""
        self.app.pop_screen()
