"""VLC player backend for podplayer."""

from __future__ import annotations

import asyncio

import vlc

from podplayer.player.base import BasePlayer, PlayerState, TransportError


class VLCPlayer(BasePlayer):
    """Player implementation using python-vlc (libVLC).

    Requires VLC to be installed on the system.
    """

    def __init__(self) -> None:
        """Initialize the VLC player."""
        super().__init__()
        self._instance = vlc.Instance("--no-video", "--quiet")
        self._player: vlc.MediaPlayer = self._instance.media_player_new()
        self._media: vlc.Media | None = None

    async def play(self, path: str, start_ms: int = 0) -> None:
        """Start playback from the given path.

        Args:
            path: URL or file path to play.
            start_ms: Starting position in milliseconds.

        Raises:
            TransportError: If libVLC refuses the resource.
        """
        await self.stop()

        self._media = self._instance.media_new(path)
        if self._media is None:
            raise TransportError(path, "libVLC could not create media")
        self._player.set_media(self._media)
        self._player.audio_set_volume(self._volume)

        if self._player.play() == -1:
            self._media = None
            raise TransportError(path, "libVLC could not start playback")
        self._state = PlayerState.PLAYING

        # Wait for VLC to start playing before seeking
        await asyncio.sleep(0.1)

        if start_ms > 0:
            self._player.set_time(start_ms)
            self._position_ms = start_ms

        self._start_polling()

    async def pause(self) -> None:
        """Pause playback."""
        if self._state == PlayerState.PLAYING:
            self._player.set_pause(1)
            self._state = PlayerState.PAUSED

    async def resume(self) -> None:
        """Resume playback."""
        if self._state == PlayerState.PAUSED:
            self._player.set_pause(0)
            self._state = PlayerState.PLAYING

    async def stop(self) -> None:
        """Stop playback."""
        self._stop_polling()
        self._player.stop()
        self._state = PlayerState.STOPPED
        self._position_ms = 0
        self._duration_ms = 0
        self._media = None

    async def seek(self, position_ms: int) -> None:
        """Seek to the given position.

        Args:
            position_ms: Target position in milliseconds.
        """
        if self._state != PlayerState.STOPPED:
            clamped = max(0, min(position_ms, self._duration_ms))
            self._player.set_time(clamped)
            self._position_ms = clamped

    async def set_volume(self, volume: int) -> None:
        """Set the playback volume.

        Args:
            volume: Volume level (0-100).
        """
        self._volume = self._clamp_volume(volume)
        self._player.audio_set_volume(self._volume)

    async def _poll_position(self) -> None:
        """Poll VLC for position, duration, end of media and errors."""
        try:
            while True:
                state = self._player.get_state()

                if state == vlc.State.Error:
                    self._state = PlayerState.STOPPED
                    await self._emit_error("libVLC could not open or decode the media")
                    break

                if state == vlc.State.Ended:
                    self._state = PlayerState.STOPPED
                    self._position_ms = self._duration_ms
                    await self._emit_ended()
                    break

                if self._state == PlayerState.PLAYING:
                    pos = self._player.get_time()
                    if pos >= 0:
                        self._position_ms = pos

                    dur = self._player.get_length()
                    if dur > 0:
                        self._duration_ms = dur

                    await self._emit_tick()

                await asyncio.sleep(self._poll_interval)
        except asyncio.CancelledError:
            pass

    def __del__(self) -> None:
        """Clean up VLC resources."""
        self._stop_polling()
        if self._player:
            self._player.stop()
            self._player.release()
        if self._instance:
            self._instance.release()
