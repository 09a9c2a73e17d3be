"""Persisted pointer to what the session is playing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiosqlite
from pydantic import TypeAdapter

from podplayer.database import CURRENT_QUEUE_KEY, CURRENT_TRACK_KEY
from podplayer.logging import get_logger
from podplayer.models import QueueEntry, SessionSnapshot, Track

if TYPE_CHECKING:
    from collections.abc import Sequence

    from podplayer.database import Database

_log = get_logger("snapshot")

_TRACK = TypeAdapter(Track)
_QUEUE = TypeAdapter(tuple[QueueEntry, ...])


class SnapshotStore:
    """Stores the current track and queue, separately from progress."""

    def __init__(self, database: Database) -> None:
        """Initialize the store.

        Args:
            database: Connected key-value database.
        """
        self._db = database

    async def load(self) -> SessionSnapshot | None:
        """Load the persisted snapshot, or None when nothing was playing."""
        try:
            raw_track = await self._db.get(CURRENT_TRACK_KEY)
            if raw_track is None:
                return None
            track = _TRACK.validate_json(raw_track)
            raw_queue = await self._db.get(CURRENT_QUEUE_KEY)
            queue = _QUEUE.validate_json(raw_queue) if raw_queue else ()
        except (aiosqlite.Error, ValueError) as e:
            _log.warning("Could not restore session snapshot: %s", e)
            return None
        return SessionSnapshot(current_track=track, queue=queue)

    async def save(self, track: Track, queue: Sequence[QueueEntry]) -> None:
        """Persist the current track and its queue."""
        try:
            await self._db.set(CURRENT_TRACK_KEY, _TRACK.dump_json(track).decode())
            await self._db.set(
                CURRENT_QUEUE_KEY, _QUEUE.dump_json(tuple(queue)).decode()
            )
        except aiosqlite.Error as e:
            _log.warning("Could not save session snapshot: %s", e)

    async def clear(self) -> None:
        """Erase the snapshot."""
        try:
            await self._db.delete(CURRENT_TRACK_KEY)
            await self._db.delete(CURRENT_QUEUE_KEY)
        except aiosqlite.Error as e:
            _log.warning("Could not clear session snapshot: %s", e)
