"""Show screen with seasons and episodes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from podplayer.catalog import CatalogError, genre_names
from podplayer.logging import get_logger
from podplayer.models import FavoriteEpisode
from podplayer.widgets.episode_list import (
    EpisodeList,
    EpisodeSelected,
    SeasonList,
    SeasonSelected,
)
from podplayer.widgets.player_bar import PlayerBar

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from podplayer.app import PodplayerApp
    from podplayer.models import Season, Show, ShowPreview

_log = get_logger("screens.show")


class ShowScreen(Screen[None]):
    """Seasons of one show and the episodes of the highlighted season."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("escape", "back", "Back"),
        Binding("f", "toggle_favorite", "Favorite"),
        Binding("tab", "focus_next", "Next Pane", show=False),
        Binding("shift+tab", "focus_previous", "Prev Pane", show=False),
    ]

    DEFAULT_CSS = """
    ShowScreen #show-header {
        height: auto;
        max-height: 8;
        padding: 0 1;
        border-bottom: solid $primary;
    }
    """

    def __init__(self, preview: ShowPreview) -> None:
        """Initialize the show screen.

        Args:
            preview: The show as listed in the directory.
        """
        super().__init__()
        self._preview = preview
        self._show: Show | None = None

    @property
    def show(self) -> Show | None:
        """The loaded show, or None while loading."""
        return self._show

    def compose(self) -> ComposeResult:
        """Compose the show screen layout."""
        yield Header()
        yield Static(f"{self._preview.title}\n\nLoading seasons...", id="show-header")
        with Horizontal():
            yield SeasonList()
            yield EpisodeList()
        yield PlayerBar()
        yield Footer()

    def on_mount(self) -> None:
        """Fetch the show in the background."""
        self.run_worker(self.load_show(), exclusive=True, group="show")

    async def on_screen_resume(self) -> None:
        """Repaint progress and favorites when coming back to this screen."""
        await self.refresh_episodes()

    async def load_show(self) -> None:
        """Fetch the show and display its first season."""
        app: PodplayerApp = self.app  # type: ignore[assignment]
        header = self.query_one("#show-header", Static)
        try:
            show = await app.catalog.get_show(self._preview.id)
        except CatalogError as e:
            _log.warning("Could not load show %s: %s", self._preview.id, e)
            header.update(f"{self._preview.title}\n\nCould not load this show.")
            self.notify(f"Could not load show: {e}", severity="error")
            return

        self._show = show
        genres = ", ".join(genre_names(show.genres or self._preview.genres))
        header.update(
            f"{show.title}\n{genres}\n\n{show.description}"
            if genres
            else f"{show.title}\n\n{show.description}"
        )
        season_list = self.query_one(SeasonList)
        season_list.set_seasons(show.seasons)
        if show.seasons:
            season_list.highlighted = 0
            await self._display_season(show.seasons[0])
        season_list.focus()

    async def _display_season(self, season: Season) -> None:
        app: PodplayerApp = self.app  # type: ignore[assignment]
        progress = await app.progress.all()
        favorites = await app.favorites.ids()
        self.query_one(EpisodeList).set_episodes(season, progress, favorites)

    async def refresh_episodes(self) -> None:
        """Repaint the displayed season with current progress and favorites."""
        season = self.query_one(EpisodeList).season
        if season is not None:
            await self._display_season(season)

    async def on_season_selected(self, event: SeasonSelected) -> None:
        """Display the highlighted season."""
        await self._display_season(event.season)

    async def on_episode_selected(self, event: EpisodeSelected) -> None:
        """Publish a play request with the season as queue."""
        if self._show is None:
            return
        if not event.episode.file:
            self.notify("No audio available for this episode", severity="warning")
            return

        app: PodplayerApp = self.app  # type: ignore[assignment]
        await app.bus.publish(self._show.play_request(event.season, event.episode))
        self.notify(f"Playing: {event.episode.title}")

    async def action_toggle_favorite(self) -> None:
        """Add or remove the highlighted episode from the favorites."""
        episode_list = self.query_one(EpisodeList)
        episode = episode_list.get_selected_episode()
        season = episode_list.season
        if self._show is None or season is None or episode is None:
            self.notify("No episode selected", severity="warning")
            return

        app: PodplayerApp = self.app  # type: ignore[assignment]
        favorite = FavoriteEpisode.from_catalog(
            self._show, season, episode, added_at=datetime.now(UTC)
        )
        added = await app.favorites.toggle(favorite)
        await self.refresh_episodes()
        if added:
            self.notify(f"Added to favorites: {episode.title}")
        else:
            self.notify(f"Removed from favorites: {episode.title}")

    def action_back(self) -> None:
        """Go back to the previous screen."""
        self.app.pop_screen()
