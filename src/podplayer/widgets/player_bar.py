"""Player bar widget showing the playback session."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Label, ProgressBar, Static

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from podplayer.session import PlaybackSession


class PlayerBar(Static):
    """Now-playing bar rendered on every screen.

    Hidden while the session is idle. The collapsed variant keeps only the
    title and status line.
    """

    DEFAULT_CSS = """
    PlayerBar {
        height: auto;
        dock: bottom;
        background: $surface;
        border-top: solid $primary;
        padding: 0 1;
    }

    PlayerBar Horizontal {
        height: 1;
        width: 100%;
    }

    PlayerBar #player-title {
        width: 1fr;
        text-style: bold;
    }

    PlayerBar #player-status {
        width: auto;
        min-width: 9;
        text-align: right;
    }

    PlayerBar #player-time {
        width: auto;
        min-width: 14;
        text-align: right;
    }

    PlayerBar #player-volume {
        width: auto;
        min-width: 10;
        text-align: right;
    }

    PlayerBar #player-next {
        color: $text-muted;
    }

    PlayerBar #player-error {
        color: $error;
        display: none;
    }

    PlayerBar.has-error #player-error {
        display: block;
    }

    PlayerBar ProgressBar {
        width: 100%;
        height: 1;
        padding: 0;
    }

    PlayerBar ProgressBar Bar {
        width: 100%;
    }

    PlayerBar.collapsed #player-next,
    PlayerBar.collapsed ProgressBar,
    PlayerBar.collapsed #player-volume {
        display: none;
    }
    """

    title: reactive[str] = reactive("")
    status: reactive[str] = reactive("Idle")
    position: reactive[float] = reactive(0.0)
    duration: reactive[float] = reactive(0.0)
    volume: reactive[float] = reactive(1.0)
    upcoming: reactive[str] = reactive("")
    error: reactive[str] = reactive("")

    def compose(self) -> ComposeResult:
        """Compose the player bar layout."""
        with Horizontal():
            yield Label(self.title, id="player-title")
            yield Label(self.status, id="player-status")
            yield Label(self._time_text(), id="player-time")
            yield Label(self._volume_text(), id="player-volume")
        yield Label("", id="player-next")
        yield ProgressBar(total=100, show_eta=False, show_percentage=False)
        yield Label("", id="player-error")

    def on_mount(self) -> None:
        """Start hidden until something plays."""
        self.display = False

    def show_session(self, session: PlaybackSession) -> None:
        """Mirror the state of the playback session.

        Args:
            session: The process-wide playback session.
        """
        self.display = session.is_active
        self.set_class(session.collapsed, "collapsed")
        track = session.current_track
        if track is None:
            return

        self.title = track.title or track.id
        self.status = session.status.label
        self.position = session.position
        self.duration = session.duration
        self.volume = session.volume
        upcoming = session.upcoming
        self.upcoming = (upcoming.title or upcoming.id) if upcoming else ""
        self.error = session.error or ""

    def watch_title(self, title: str) -> None:
        """Update the title label."""
        self._set_label("#player-title", title)

    def watch_status(self, status: str) -> None:
        """Update the status label."""
        self._set_label("#player-status", status)

    def watch_position(self, _position: float) -> None:
        """Update progress and time when the position changes."""
        self._update_progress()

    def watch_duration(self, _duration: float) -> None:
        """Update progress and time when the duration changes."""
        self._update_progress()

    def watch_volume(self, _volume: float) -> None:
        """Update the volume label."""
        self._set_label("#player-volume", self._volume_text())

    def watch_upcoming(self, upcoming: str) -> None:
        """Update the next-up label."""
        self._set_label("#player-next", f"Next: {upcoming}" if upcoming else "")

    def watch_error(self, error: str) -> None:
        """Show or hide the playback error."""
        self.set_class(bool(error), "has-error")
        self._set_label("#player-error", f"Playback error: {error}" if error else "")

    def _update_progress(self) -> None:
        with contextlib.suppress(NoMatches):
            progress_bar = self.query_one(ProgressBar)
            if self.duration > 0:
                progress_bar.update(progress=(self.position / self.duration) * 100)
            else:
                progress_bar.update(progress=0)
        self._set_label("#player-time", self._time_text())

    def _set_label(self, selector: str, text: str) -> None:
        with contextlib.suppress(NoMatches):
            self.query_one(selector, Label).update(text)

    def _time_text(self) -> str:
        return f"{self.format_time(self.position)} / {self.format_time(self.duration)}"

    def _volume_text(self) -> str:
        return f"Vol {round(self.volume * 100)}%"

    @staticmethod
    def format_time(seconds: float) -> str:
        """Format seconds as ``m:ss``.

        Args:
            seconds: Time in seconds; negative values count as zero.

        Returns:
            Formatted time string.
        """
        total = max(0, int(seconds))
        minutes, secs = divmod(total, 60)
        return f"{minutes}:{secs:02d}"
