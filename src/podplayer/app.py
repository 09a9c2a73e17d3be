"""Main Textual application for podplayer."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App
from textual.binding import Binding

from podplayer.catalog import CatalogClient
from podplayer.config import get_config, get_data_path
from podplayer.database import Database
from podplayer.favorites import FavoritesStore
from podplayer.logging import configure_from, get_logger
from podplayer.player.base import NullPlayer
from podplayer.preferences import TEXTUAL_THEMES, ThemePreference
from podplayer.screens.favorites import FavoritesScreen
from podplayer.screens.home import HomeScreen
from podplayer.screens.settings import SettingsScreen
from podplayer.session import (
    PlaybackSession,
    ProgressStore,
    SessionBus,
    SnapshotStore,
)
from podplayer.widgets.confirm_dialog import ConfirmDialog
from podplayer.widgets.player_bar import PlayerBar

if TYPE_CHECKING:
    from pathlib import Path

    from podplayer.config import Config
    from podplayer.models import ShowPreview
    from podplayer.player.base import BasePlayer

_log = get_logger("app")


class PodplayerApp(App[None]):
    """Podcast directory and player for the terminal.

    Owns the one playback session of the process. Screens publish play
    requests on ``bus`` and drive the transport through ``session``.
    """

    TITLE = "podplayer"

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("q", "request_quit", "Quit"),
        Binding("space", "toggle_play", "Play/Pause"),
        Binding("n", "next_track", "Next"),
        Binding("p", "prev_track", "Prev"),
        Binding("right", "seek_forward", "Seek +", show=False),
        Binding("left", "seek_backward", "Seek -", show=False),
        Binding("plus", "volume_up", "Vol+", show=False),
        Binding("minus", "volume_down", "Vol-", show=False),
        Binding("c", "toggle_collapsed", "Collapse Player", show=False),
        Binding("x", "close_player", "Close Player", show=False),
        Binding("F", "open_favorites", "Favorites"),
        Binding("s", "open_settings", "Settings"),
        Binding("t", "toggle_theme", "Theme", show=False),
    ]

    def __init__(
        self,
        config: Config | None = None,
        *,
        data_path: Path | None = None,
        player: BasePlayer | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            config: Configuration; loaded from the config file when omitted.
            data_path: Directory of the database and log file.
            player: Audio transport; created from the config when omitted.
        """
        super().__init__()
        self._config = config or get_config()
        self._data_path = data_path or get_data_path()
        self._player_notice: str | None = None
        self._player: BasePlayer = player or self._create_player()
        self._catalog = CatalogClient(
            base_url=self._config.network.catalog_url,
            timeout=self._config.network.timeout,
        )
        self._bus = SessionBus()
        self._db: Database | None = None
        self._session: PlaybackSession | None = None
        self._progress: ProgressStore | None = None
        self._favorites: FavoritesStore | None = None
        self._theme_preference: ThemePreference | None = None
        self._previews: list[ShowPreview] | None = None

    def _create_player(self) -> BasePlayer:
        """Create the player backend named in the config.

        Returns:
            Player instance (VLC, MPV, or NullPlayer as fallback).
        """
        backend = self._config.player.backend

        if backend == "vlc":
            try:
                from podplayer.player.vlc import VLCPlayer

                return VLCPlayer()
            except (ImportError, OSError) as e:
                _log.warning("VLC not available: %s", e)
                self._player_notice = "VLC not available, using silent player"
                return NullPlayer()
        elif backend == "mpv":
            try:
                from podplayer.player.mpv import MPVPlayer

                return MPVPlayer()
            except (ImportError, OSError) as e:
                _log.warning("MPV not available: %s", e)
                self._player_notice = "MPV not available, using silent player"
                return NullPlayer()
        else:
            return NullPlayer()

    @property
    def config(self) -> Config:
        """Get the configuration."""
        return self._config

    @property
    def database(self) -> Database:
        """Get the database instance."""
        if self._db is None:
            raise RuntimeError("Database not initialized")
        return self._db

    @property
    def player(self) -> BasePlayer:
        """Get the audio transport."""
        return self._player

    @property
    def bus(self) -> SessionBus:
        """Get the channel screens publish play requests on."""
        return self._bus

    @property
    def session(self) -> PlaybackSession:
        """Get the playback session."""
        if self._session is None:
            raise RuntimeError("Session not initialized")
        return self._session

    @property
    def progress(self) -> ProgressStore:
        """Get the listening progress store."""
        if self._progress is None:
            raise RuntimeError("Progress store not initialized")
        return self._progress

    @property
    def favorites(self) -> FavoritesStore:
        """Get the favorites store."""
        if self._favorites is None:
            raise RuntimeError("Favorites store not initialized")
        return self._favorites

    @property
    def catalog(self) -> CatalogClient:
        """Get the catalog client."""
        return self._catalog

    async def on_mount(self) -> None:
        """Set up the application on mount."""
        configure_from(self._config.logging, log_dir=self._data_path)
        _log.info("podplayer starting up")

        db_path = self._data_path / "podplayer.db"
        self._db = Database(db_path)
        await self._db.connect()
        _log.info("Database connected: %s", db_path)

        self._progress = ProgressStore(self._db)
        self._favorites = FavoritesStore(self._db)
        self._theme_preference = ThemePreference(self._db, default=self._config.ui.theme)
        self.theme = TEXTUAL_THEMES[await self._theme_preference.load()]

        self._session = PlaybackSession(
            self._bus,
            self._player,
            self._progress,
            SnapshotStore(self._db),
            volume=self._config.player.default_volume,
            resume_rewind=self._config.player.resume_rewind,
        )
        await self._session.start()

        if self._player_notice:
            self.notify(self._player_notice, severity="warning")

        self.set_interval(self._config.ui.refresh_interval, self.refresh_player_bar)
        self.push_screen(HomeScreen())
        self.refresh_player_bar()

    async def on_unmount(self) -> None:
        """Clean up resources on unmount."""
        _log.info("podplayer shutting down")
        if self._session is not None:
            await self._session.shutdown()
        if self._db is not None:
            await self._db.close()
        _log.info("Shutdown complete")

    async def load_previews(self, *, refresh: bool = False) -> list[ShowPreview]:
        """Get the show directory, fetching it on first use.

        Args:
            refresh: Fetch again even when cached.

        Raises:
            CatalogError: If the catalog cannot be fetched.
        """
        if self._previews is None or refresh:
            self._previews = await self._catalog.get_previews()
            _log.info("Loaded %d shows", len(self._previews))
        return self._previews

    def refresh_player_bar(self) -> None:
        """Mirror the session on the player bar of the active screen."""
        if self._session is None:
            return
        for bar in self.screen.query(PlayerBar):
            bar.show_session(self._session)

    # Transport controls, inert while the session is idle

    async def action_toggle_play(self) -> None:
        """Pause or resume playback."""
        await self.session.toggle()
        self.refresh_player_bar()

    async def action_next_track(self) -> None:
        """Play the next episode of the queue."""
        if self.session.is_active and not await self.session.next():
            self.notify("End of queue")
        self.refresh_player_bar()

    async def action_prev_track(self) -> None:
        """Play the previous episode of the queue, or restart this one."""
        await self.session.prev()
        self.refresh_player_bar()

    async def action_seek_forward(self) -> None:
        """Skip forward by the configured step."""
        await self._seek_by(self._config.player.seek_step)

    async def action_seek_backward(self) -> None:
        """Skip backward by the configured step."""
        await self._seek_by(-self._config.player.seek_step)

    async def _seek_by(self, step: float) -> None:
        session = self.session
        if session.duration <= 0:
            return
        await session.seek(session.position / session.duration * 100 + step)
        self.refresh_player_bar()

    async def action_volume_up(self) -> None:
        """Raise the volume."""
        await self.session.set_volume(self.session.volume + self._config.player.volume_step)
        self.refresh_player_bar()

    async def action_volume_down(self) -> None:
        """Lower the volume."""
        await self.session.set_volume(self.session.volume - self._config.player.volume_step)
        self.refresh_player_bar()

    def action_toggle_collapsed(self) -> None:
        """Collapse or expand the player bar."""
        self.session.toggle_collapsed()
        self.refresh_player_bar()

    async def action_close_player(self) -> None:
        """Stop playback and dismiss the player bar."""
        await self.session.close()
        self.refresh_player_bar()

    # Navigation

    def action_open_favorites(self) -> None:
        """Open the favorites screen."""
        if not isinstance(self.screen, FavoritesScreen):
            self.push_screen(FavoritesScreen())

    def action_open_settings(self) -> None:
        """Open the settings screen."""
        if not isinstance(self.screen, SettingsScreen):
            self.push_screen(SettingsScreen())

    async def action_toggle_theme(self) -> None:
        """Switch between the light and dark theme and remember the choice."""
        if self._theme_preference is None:
            return
        theme = await self._theme_preference.toggle()
        self.theme = TEXTUAL_THEMES[theme]

    def action_request_quit(self) -> None:
        """Quit, asking first while an episode is playing."""
        if self._session is None or not self._session.is_playing:
            self.exit()
            return

        def quit_if_confirmed(confirmed: bool | None) -> None:
            if confirmed:
                self.exit()

        self.push_screen(
            ConfirmDialog(
                "An episode is still playing. Quit anyway?",
                title="Quit podplayer",
                confirm_label="Quit",
            ),
            quit_if_confirmed,
        )
