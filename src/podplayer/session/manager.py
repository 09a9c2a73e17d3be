"""The process-wide playback session."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from podplayer.logging import get_logger
from podplayer.models import PlayRequest, ProgressRecord
from podplayer.player.base import PlayerState, TransportError
from podplayer.session.queue import predecessor, successor

if TYPE_CHECKING:
    from collections.abc import Callable

    from podplayer.models import QueueEntry, Track
    from podplayer.player.base import BasePlayer
    from podplayer.session.bus import SessionBus
    from podplayer.session.progress import ProgressStore
    from podplayer.session.snapshot import SnapshotStore

_log = get_logger("session")


class SessionStatus(Enum):
    """Coarse state of the playback session."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()


class PlaybackSession:
    """Owns the current track, its queue and the audio transport.

    Views never call into the session to start playback; they publish a
    ``PlayRequest`` on the bus and the session adopts it. Transport
    controls (toggle, seek, volume, next, prev, close) act on the session
    directly and are inert while no track is current.

    Every handler reads the current track when it runs, so a progress tick
    is always recorded against the episode that is current at that moment.
    Each adoption starts a new generation; transport events are only
    applied while the transport was started for the current generation.
    """

    def __init__(
        self,
        bus: SessionBus,
        player: BasePlayer,
        progress: ProgressStore,
        snapshots: SnapshotStore,
        *,
        volume: float = 1.0,
        resume_rewind: float = 0.0,
    ) -> None:
        """Initialize an idle session.

        Args:
            bus: Channel the session listens to for play requests.
            player: Audio transport.
            progress: Per-episode progress store.
            snapshots: Store for the current track and queue.
            volume: Initial volume (0.0-1.0).
            resume_rewind: Seconds to step back when resuming an episode.
        """
        self._bus = bus
        self._player = player
        self._progress = progress
        self._snapshots = snapshots
        self._resume_rewind = max(0.0, resume_rewind)
        self._unsubscribe: Callable[[], None] | None = None

        self._current_track: Track | None = None
        self._queue: tuple[QueueEntry, ...] = ()
        self._is_playing = False
        self._position = 0.0
        self._duration = 0.0
        self._volume = _clamp_unit(volume)
        self._collapsed = False
        self._error: str | None = None
        self._generation = 0
        self._attached: int | None = None

    @property
    def current_track(self) -> Track | None:
        """The track being played, or None when idle."""
        return self._current_track

    @property
    def queue(self) -> tuple[QueueEntry, ...]:
        """The queue supplied with the current track."""
        return self._queue

    @property
    def is_playing(self) -> bool:
        """Whether the transport is meant to be playing."""
        return self._is_playing

    @property
    def position(self) -> float:
        """Playback position in seconds."""
        return self._position

    @property
    def duration(self) -> float:
        """Duration of the current track in seconds (0 when unknown)."""
        return self._duration

    @property
    def volume(self) -> float:
        """Volume (0.0-1.0)."""
        return self._volume

    @property
    def collapsed(self) -> bool:
        """Whether the player bar is collapsed."""
        return self._collapsed

    @property
    def error(self) -> str | None:
        """Last transport fault of the current track."""
        return self._error

    @property
    def is_active(self) -> bool:
        """Whether a track is current."""
        return self._current_track is not None

    @property
    def status(self) -> SessionStatus:
        """Idle, playing or paused."""
        if self._current_track is None:
            return SessionStatus.IDLE
        return SessionStatus.PLAYING if self._is_playing else SessionStatus.PAUSED

    @property
    def upcoming(self) -> QueueEntry | None:
        """The queue entry that follows the current track."""
        if self._current_track is None:
            return None
        return successor(self._queue, self._current_track.id)

    @property
    def is_started(self) -> bool:
        """Whether the session is listening on the bus."""
        return self._unsubscribe is not None

    # Lifecycle

    async def start(self) -> None:
        """Listen for play requests and restore the persisted session.

        A restored session is active but paused; the transport is attached
        the first time playback is toggled.
        """
        if self._unsubscribe is not None:
            return

        self._player.set_handlers(
            on_tick=self._handle_tick,
            on_ended=self._handle_ended,
            on_error=self._handle_error,
        )
        await self._player.set_volume(round(self._volume * 100))
        self._unsubscribe = self._bus.subscribe(self.adopt)

        snapshot = await self._snapshots.load()
        if snapshot is None or not snapshot.current_track.url:
            return

        track = snapshot.current_track
        self._current_track = track
        self._queue = snapshot.queue
        self._is_playing = False
        record = await self._progress.get(track.id)
        if record is not None:
            self._position = self._resume_position(record)
            self._duration = record.duration
        _log.info("Restored session: %s", track.title or track.id)

    async def shutdown(self) -> None:
        """Stop listening and release the transport.

        The snapshot is kept so the next start restores it.
        """
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._player.set_handlers()
        if self._player.state != PlayerState.STOPPED:
            await self._player.stop()

    # Transitions

    async def adopt(self, request: PlayRequest) -> bool:
        """Make a requested track and queue the session content.

        Args:
            request: The track to play and the queue that comes with it.

        Returns:
            True if the request was adopted, False if it had no playable url.
        """
        if not request.url:
            _log.warning("Ignoring play request for %s: no playable url", request.id)
            return False

        track = request.to_track()
        self._generation += 1
        generation = self._generation
        self._attached = None
        self._current_track = track
        self._queue = tuple(request.queue)
        self._is_playing = True
        self._error = None
        self._position = 0.0
        self._duration = 0.0

        await self._snapshots.save(track, self._queue)
        record = await self._progress.get(track.id)

        if generation != self._generation:
            # A newer request was adopted while the stores were busy
            return True

        if record is not None:
            self._position = self._resume_position(record)
            self._duration = record.duration

        _log.info("Playing %s from %.1fs", track.title or track.id, self._position)
        await self._start_transport(track, self._position)
        return True

    async def tick(self, position: float, duration: float) -> None:
        """Record the transport position of the current track.

        Args:
            position: Position in seconds.
            duration: Duration in seconds (0 when unknown).
        """
        track = self._current_track
        if track is None:
            return

        duration = max(0.0, duration)
        position = max(0.0, position)
        if duration > 0:
            position = min(position, duration)

        self._position = position
        self._duration = duration
        await self._progress.set(
            track.id, ProgressRecord(time=position, duration=duration)
        )

    async def toggle(self) -> None:
        """Pause or resume playback."""
        track = self._current_track
        if track is None:
            return

        state = self._player.state
        if state == PlayerState.PLAYING:
            await self._player.pause()
            self._is_playing = False
        elif state == PlayerState.PAUSED:
            await self._player.resume()
            self._is_playing = True
        else:
            # Transport detached: restored, ended or faulted
            start = 0.0 if self._finished else self._position
            self._position = start
            self._is_playing = True
            self._error = None
            await self._start_transport(track, start)

    async def seek(self, value: float) -> None:
        """Seek to a point given on a 0-100 scale.

        Args:
            value: Percentage of the duration.
        """
        if self._current_track is None or self._duration <= 0:
            return

        position = max(0.0, min((value / 100) * self._duration, self._duration))
        self._position = position
        if self._player.state != PlayerState.STOPPED:
            await self._player.seek(int(position * 1000))

    async def set_volume(self, volume: float) -> None:
        """Set the volume.

        Args:
            volume: Volume (0.0-1.0); out of range values are clamped.
        """
        if self._current_track is None:
            return
        self._volume = _clamp_unit(volume)
        await self._player.set_volume(round(self._volume * 100))

    async def next(self) -> bool:
        """Play the entry after the current track in the queue.

        Returns:
            True if a successor was adopted.
        """
        track = self._current_track
        if track is None:
            return False
        entry = successor(self._queue, track.id)
        if entry is None:
            return False
        return await self.adopt(PlayRequest.from_entry(entry, self._queue))

    async def prev(self) -> bool:
        """Play the entry before the current track, or restart the track.

        Returns:
            True if a predecessor was adopted.
        """
        track = self._current_track
        if track is None:
            return False
        entry = predecessor(self._queue, track.id)
        if entry is not None:
            return await self.adopt(PlayRequest.from_entry(entry, self._queue))

        self._position = 0.0
        if self._player.state != PlayerState.STOPPED:
            await self._player.seek(0)
        return False

    async def ended(self) -> None:
        """Advance after the transport played the track to its end."""
        if self._current_track is None:
            return
        if await self.next():
            return
        self._is_playing = False
        if self._duration > 0:
            self._position = self._duration

    async def close(self) -> None:
        """Return to idle and forget what was playing.

        Listening progress of the closed episode is kept.
        """
        self._generation += 1
        self._attached = None
        if self._player.state != PlayerState.STOPPED:
            await self._player.stop()
        self._current_track = None
        self._queue = ()
        self._is_playing = False
        self._position = 0.0
        self._duration = 0.0
        self._error = None
        await self._snapshots.clear()
        _log.info("Session closed")

    def toggle_collapsed(self) -> None:
        """Collapse or expand the player bar."""
        self._collapsed = not self._collapsed

    # Transport glue

    @property
    def _finished(self) -> bool:
        return self._duration > 0 and self._position >= self._duration

    def _resume_position(self, record: ProgressRecord) -> float:
        return max(0.0, record.time - self._resume_rewind)

    async def _start_transport(self, track: Track, start: float) -> None:
        self._attached = self._generation
        try:
            await self._player.play(track.url, start_ms=int(start * 1000))
        except TransportError as e:
            await self._handle_error(str(e))

    @property
    def _superseded(self) -> bool:
        return self._attached != self._generation

    async def _handle_tick(self, position_ms: int, duration_ms: int) -> None:
        if self._superseded:
            _log.debug("Dropping tick from a superseded transport")
            return
        await self.tick(position_ms / 1000, duration_ms / 1000)

    async def _handle_ended(self) -> None:
        if self._superseded:
            _log.debug("Dropping end of a superseded transport")
            return
        await self.ended()

    async def _handle_error(self, message: str) -> None:
        if self._superseded:
            _log.debug("Dropping fault of a superseded transport: %s", message)
            return
        track = self._current_track
        _log.error(
            "Transport fault on %s: %s", track.id if track else "<idle>", message
        )
        self._error = message
        self._is_playing = self._player.state == PlayerState.PLAYING


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))
