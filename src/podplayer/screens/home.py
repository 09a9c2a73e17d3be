"""Home screen with the show directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from podplayer.catalog import (
    CatalogError,
    ShowFilters,
    ShowSort,
    available_genres,
    filter_shows,
    recommend,
)
from podplayer.logging import get_logger
from podplayer.screens.show import ShowScreen
from podplayer.widgets.player_bar import PlayerBar
from podplayer.widgets.show_list import ShowList, ShowSelected

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from podplayer.app import PodplayerApp
    from podplayer.models import ShowPreview

_log = get_logger("screens.home")


class HomeScreen(Screen[None]):
    """Searchable, filterable directory of every show in the catalog."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("slash", "focus_search", "Search"),
        Binding("g", "cycle_genre", "Genre"),
        Binding("o", "cycle_sort", "Sort"),
        Binding("r", "clear_filters", "Clear Filters"),
        Binding("R", "reload", "Reload", show=False),
        Binding("escape", "focus_shows", "Shows", show=False),
    ]

    DEFAULT_CSS = """
    HomeScreen #search {
        margin: 0 1;
    }

    HomeScreen #filter-status {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }

    HomeScreen #recommended-pane {
        width: 40;
    }

    HomeScreen .pane-title {
        padding: 0 1;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        """Initialize the home screen."""
        super().__init__()
        self._shows: list[ShowPreview] = []
        self._filters = ShowFilters()
        self._status = "Loading shows..."

    @property
    def status(self) -> str:
        """Text of the status line above the directory."""
        return self._status

    @property
    def filters(self) -> ShowFilters:
        """Filters applied to the directory."""
        return self._filters

    def compose(self) -> ComposeResult:
        """Compose the home screen layout."""
        yield Header()
        yield Input(placeholder="Search shows by title...", id="search")
        yield Static(self._status, id="filter-status")
        with Horizontal():
            with Vertical():
                yield Static("All Shows", classes="pane-title")
                yield ShowList(id="shows")
            with Vertical(id="recommended-pane"):
                yield Static("Recommended", classes="pane-title")
                yield ShowList(id="recommended")
        yield PlayerBar()
        yield Footer()

    def on_mount(self) -> None:
        """Fetch the catalog in the background."""
        self.run_worker(self.load_shows(), exclusive=True, group="catalog")

    async def load_shows(self, *, refresh: bool = False) -> None:
        """Load the show directory and the recommended row.

        Args:
            refresh: Fetch again even when the catalog is cached.
        """
        app: PodplayerApp = self.app  # type: ignore[assignment]
        try:
            shows = await app.load_previews(refresh=refresh)
        except CatalogError as e:
            _log.warning("Could not load shows: %s", e)
            self._set_status("Could not load shows. Press R to retry.")
            self.notify(f"Could not load shows: {e}", severity="error")
            return

        self._shows = shows
        self.query_one("#recommended", ShowList).set_shows(
            recommend(shows, app.config.ui.recommended_count)
        )
        self._apply_filters()

    def _apply_filters(self) -> None:
        shows = filter_shows(self._shows, self._filters)
        self.query_one("#shows", ShowList).set_shows(shows)
        self._set_status(self._status_text(len(shows)))

    def _set_status(self, text: str) -> None:
        self._status = text
        self.query_one("#filter-status", Static).update(text)

    def _status_text(self, count: int) -> str:
        parts = [f"{count} of {len(self._shows)} shows", f"Sort: {self._filters.sort.label}"]
        if self._filters.genre:
            parts.append(f"Genre: {self._filters.genre}")
        if self._filters.search:
            parts.append(f"Search: {self._filters.search}")
        return " · ".join(parts)

    def set_filters(self, filters: ShowFilters) -> None:
        """Replace the filters and redraw the directory."""
        self._filters = filters
        self._apply_filters()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter as the search text changes."""
        if event.input.id == "search":
            self.set_filters(self._filters.model_copy(update={"search": event.value}))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Move to the results after searching."""
        if event.input.id == "search":
            self.action_focus_shows()

    def on_show_selected(self, event: ShowSelected) -> None:
        """Open the selected show."""
        self.app.push_screen(ShowScreen(event.show))

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search", Input).focus()

    def action_focus_shows(self) -> None:
        """Focus the show directory."""
        self.query_one("#shows", ShowList).focus()

    def action_cycle_genre(self) -> None:
        """Cycle the genre filter through the genres present in the catalog."""
        genres = ["", *available_genres(self._shows)]
        current = genres.index(self._filters.genre) if self._filters.genre in genres else 0
        genre = genres[(current + 1) % len(genres)]
        self.set_filters(self._filters.model_copy(update={"genre": genre}))
        self.notify(f"Genre: {genre or 'All'}")

    def action_cycle_sort(self) -> None:
        """Cycle through the sort orders."""
        sorts = list(ShowSort)
        sort = sorts[(sorts.index(self._filters.sort) + 1) % len(sorts)]
        self.set_filters(self._filters.model_copy(update={"sort": sort}))
        self.notify(f"Sort: {sort.label}")

    def action_clear_filters(self) -> None:
        """Reset search, genre and sort."""
        self.query_one("#search", Input).value = ""
        self.set_filters(ShowFilters())

    def action_reload(self) -> None:
        """Fetch the catalog again."""
        self.run_worker(self.load_shows(refresh=True), exclusive=True, group="catalog")
