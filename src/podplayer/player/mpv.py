"""MPV player backend for podplayer."""

from __future__ import annotations

import asyncio

import mpv

from podplayer.player.base import BasePlayer, PlayerState, TransportError


class MPVPlayer(BasePlayer):
    """Player implementation using python-mpv.

    Requires mpv (libmpv) to be installed on the system.
    """

    def __init__(self) -> None:
        """Initialize the MPV player."""
        super().__init__()
        self._player = mpv.MPV(
            video=False,
            terminal=False,
            input_default_bindings=False,
            input_vo_keyboard=False,
        )
        # Written by mpv's event thread, consumed by the polling task
        self._end_reason: int | None = None

        @self._player.event_callback("end-file")  # type: ignore[untyped-decorator]
        def on_end_file(event: mpv.MpvEvent) -> None:
            reason = getattr(event.data, "reason", None)
            if reason in (mpv.MpvEventEndFile.EOF, mpv.MpvEventEndFile.ERROR):
                self._end_reason = reason

    async def play(self, path: str, start_ms: int = 0) -> None:
        """Start playback from the given path.

        Args:
            path: URL or file path to play.
            start_ms: Starting position in milliseconds.

        Raises:
            TransportError: If mpv rejects the resource.
        """
        await self.stop()
        self._end_reason = None

        try:
            self._player.play(path)
        except mpv.ShutdownError as e:
            raise TransportError(path, "mpv has shut down") from e
        self._player.pause = False
        self._state = PlayerState.PLAYING

        # Wait for mpv to start
        await asyncio.sleep(0.1)

        if start_ms > 0:
            self._player.seek(start_ms / 1000.0, reference="absolute")
            self._position_ms = start_ms

        self._player.volume = self._volume

        self._start_polling()

    async def pause(self) -> None:
        """Pause playback."""
        if self._state == PlayerState.PLAYING:
            self._player.pause = True
            self._state = PlayerState.PAUSED

    async def resume(self) -> None:
        """Resume playback."""
        if self._state == PlayerState.PAUSED:
            self._player.pause = False
            self._state = PlayerState.PLAYING

    async def stop(self) -> None:
        """Stop playback."""
        self._stop_polling()
        self._player.stop()
        self._state = PlayerState.STOPPED
        self._position_ms = 0
        self._duration_ms = 0

    async def seek(self, position_ms: int) -> None:
        """Seek to the given position.

        Args:
            position_ms: Target position in milliseconds.
        """
        if self._state != PlayerState.STOPPED:
            clamped = max(0, min(position_ms, self._duration_ms))
            self._player.seek(clamped / 1000.0, reference="absolute")
            self._position_ms = clamped

    async def set_volume(self, volume: int) -> None:
        """Set the playback volume.

        Args:
            volume: Volume level (0-100).
        """
        self._volume = self._clamp_volume(volume)
        self._player.volume = self._volume

    async def _poll_position(self) -> None:
        """Poll mpv for position and duration, and relay end-file events."""
        try:
            while True:
                reason = self._end_reason
                if reason is not None:
                    self._end_reason = None
                    self._state = PlayerState.STOPPED
                    if reason == mpv.MpvEventEndFile.ERROR:
                        await self._emit_error("mpv could not open or decode the media")
                    else:
                        if self._duration_ms > 0:
                            self._position_ms = self._duration_ms
                        await self._emit_ended()
                    break

                if self._state == PlayerState.PLAYING:
                    try:
                        pos = self._player.time_pos
                        dur = self._player.duration
                    except mpv.ShutdownError:
                        break
                    if pos is not None:
                        self._position_ms = int(pos * 1000)
                    if dur is not None:
                        self._duration_ms = int(dur * 1000)

                    await self._emit_tick()

                await asyncio.sleep(self._poll_interval)
        except asyncio.CancelledError:
            pass

    def __del__(self) -> None:
        """Clean up mpv resources."""
        self._stop_polling()
        if self._player:
            self._player.terminate()
