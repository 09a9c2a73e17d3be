"""Base player interface for podplayer."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from enum import IntEnum
from typing import Protocol, runtime_checkable

# Handlers receive the transport state as arguments at every invocation
TickHandler = Callable[[int, int], Awaitable[None]]
EndedHandler = Callable[[], Awaitable[None]]
ErrorHandler = Callable[[str], Awaitable[None]]


class TransportError(Exception):
    """The audio resource could not be opened or decoded."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot play {path}: {message}")


class PlayerState(IntEnum):
    """Playback state of a player."""

    STOPPED = 0
    PLAYING = 1
    PAUSED = 2


@runtime_checkable
class Player(Protocol):
    """Protocol defining the player interface.

    All player implementations must satisfy this protocol.
    """

    @property
    def state(self) -> PlayerState:
        """Current playback state."""
        ...

    @property
    def position_ms(self) -> int:
        """Current playback position in milliseconds."""
        ...

    @property
    def duration_ms(self) -> int:
        """Total duration in milliseconds."""
        ...

    @property
    def volume(self) -> int:
        """Current volume (0-100)."""
        ...

    def set_handlers(
        self,
        *,
        on_tick: TickHandler | None = None,
        on_ended: EndedHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        """Install the callbacks driven by playback."""
        ...

    async def play(self, path: str, start_ms: int = 0) -> None:
        """Start playback from the given path.

        Args:
            path: URL or file path to play.
            start_ms: Starting position in milliseconds.
        """
        ...

    async def pause(self) -> None:
        """Pause playback."""
        ...

    async def resume(self) -> None:
        """Resume playback."""
        ...

    async def stop(self) -> None:
        """Stop playback."""
        ...

    async def seek(self, position_ms: int) -> None:
        """Seek to the given position.

        Args:
            position_ms: Target position in milliseconds.
        """
        ...

    async def set_volume(self, volume: int) -> None:
        """Set the playback volume.

        Args:
            volume: Volume level (0-100).
        """
        ...


class BasePlayer(ABC):
    """Abstract base class for player implementations.

    Provides state bookkeeping, handler dispatch and the polling task
    shared by the native backends.
    """

    MIN_VOLUME = 0
    MAX_VOLUME = 100

    def __init__(self) -> None:
        """Initialize the base player."""
        self._state = PlayerState.STOPPED
        self._volume = 100
        self._position_ms = 0
        self._duration_ms = 0
        self._on_tick: TickHandler | None = None
        self._on_ended: EndedHandler | None = None
        self._on_error: ErrorHandler | None = None
        self._poll_task: asyncio.Task[None] | None = None
        self._poll_interval = 0.5  # seconds

    @property
    def state(self) -> PlayerState:
        """Current playback state."""
        return self._state

    @property
    def position_ms(self) -> int:
        """Current playback position in milliseconds."""
        return self._position_ms

    @property
    def duration_ms(self) -> int:
        """Total duration in milliseconds."""
        return self._duration_ms

    @property
    def volume(self) -> int:
        """Current volume (0-100)."""
        return self._volume

    def set_handlers(
        self,
        *,
        on_tick: TickHandler | None = None,
        on_ended: EndedHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        """Install the callbacks driven by playback.

        Args:
            on_tick: Called with (position_ms, duration_ms) while playing.
            on_ended: Called when the resource plays to its end.
            on_error: Called with a message when the resource fails.
        """
        self._on_tick = on_tick
        self._on_ended = on_ended
        self._on_error = on_error

    def _clamp_volume(self, volume: int) -> int:
        """Clamp volume to valid range."""
        return max(self.MIN_VOLUME, min(self.MAX_VOLUME, volume))

    async def _emit_tick(self) -> None:
        if self._on_tick is not None:
            await self._on_tick(self._position_ms, self._duration_ms)

    async def _emit_ended(self) -> None:
        if self._on_ended is not None:
            await self._on_ended()

    async def _emit_error(self, message: str) -> None:
        if self._on_error is not None:
            await self._on_error(message)

    def _start_polling(self) -> None:
        """Start the position polling task."""
        if self._poll_task is None or self._poll_task.done():
            self._poll_task = asyncio.create_task(self._poll_position())

    def _stop_polling(self) -> None:
        """Stop the position polling task.

        The ended and error handlers run inside the polling task and may
        start the next episode; the task never cancels itself.
        """
        task = self._poll_task
        self._poll_task = None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        if task is not current:
            task.cancel()

    async def _poll_position(self) -> None:
        """Poll the backend; native players override this."""

    @abstractmethod
    async def play(self, path: str, start_ms: int = 0) -> None:
        """Start playback from the given path."""
        ...

    @abstractmethod
    async def pause(self) -> None:
        """Pause playback."""
        ...

    @abstractmethod
    async def resume(self) -> None:
        """Resume playback."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop playback."""
        ...

    @abstractmethod
    async def seek(self, position_ms: int) -> None:
        """Seek to the given position."""
        ...

    @abstractmethod
    async def set_volume(self, volume: int) -> None:
        """Set the playback volume."""
        ...


class NullPlayer(BasePlayer):
    """A silent player that simulates playback.

    Time only moves when ``advance`` is called, which makes it the backend
    used by the tests and on machines without libVLC or libmpv.
    """

    def __init__(self, duration_ms: int = 60000) -> None:
        """Initialize the null player.

        Args:
            duration_ms: Duration reported for every resource.
        """
        super().__init__()
        self._default_duration_ms = duration_ms
        self.path: str | None = None
        self.plays: list[tuple[str, int]] = []

    async def play(self, path: str, start_ms: int = 0) -> None:
        """Simulate starting playback."""
        self.path = path
        self.plays.append((path, start_ms))
        self._state = PlayerState.PLAYING
        self._duration_ms = self._default_duration_ms
        self._position_ms = max(0, min(start_ms, self._duration_ms))

    async def pause(self) -> None:
        """Simulate pausing playback."""
        if self._state == PlayerState.PLAYING:
            self._state = PlayerState.PAUSED

    async def resume(self) -> None:
        """Simulate resuming playback."""
        if self._state == PlayerState.PAUSED:
            self._state = PlayerState.PLAYING

    async def stop(self) -> None:
        """Simulate stopping playback."""
        self._state = PlayerState.STOPPED
        self._position_ms = 0
        self._duration_ms = 0
        self.path = None

    async def seek(self, position_ms: int) -> None:
        """Simulate seeking."""
        self._position_ms = max(0, min(position_ms, self._duration_ms))

    async def set_volume(self, volume: int) -> None:
        """Set volume."""
        self._volume = self._clamp_volume(volume)

    async def advance(self, ms: int) -> None:
        """Move playback forward, ticking and ending like a real backend."""
        if self._state != PlayerState.PLAYING:
            return
        self._position_ms = min(self._position_ms + ms, self._duration_ms)
        await self._emit_tick()
        if self._position_ms >= self._duration_ms:
            await self.finish()

    async def finish(self) -> None:
        """Simulate the resource playing to its end."""
        self._state = PlayerState.STOPPED
        self._position_ms = self._duration_ms
        await self._emit_ended()

    async def fail(self, message: str = "decode error") -> None:
        """Simulate the resource failing to load or decode."""
        self._state = PlayerState.STOPPED
        await self._emit_error(message)
