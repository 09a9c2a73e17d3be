"""Per-episode listening progress store."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import aiosqlite
from pydantic import TypeAdapter

from podplayer.database import LISTENING_PROGRESS_KEY
from podplayer.logging import get_logger
from podplayer.models import ProgressRecord

if TYPE_CHECKING:
    from podplayer.database import Database

_log = get_logger("progress")

_COLLECTION = TypeAdapter(dict[str, ProgressRecord])


class ProgressStore:
    """Listening progress keyed by episode id.

    The whole collection lives under one key and is re-serialized on every
    write. Faults are logged and degrade to "absent" for reads and to a
    no-op for writes so that playback never stops over persistence.
    """

    def __init__(self, database: Database) -> None:
        """Initialize the store.

        Args:
            database: Connected key-value database.
        """
        self._db = database
        self._write_lock = asyncio.Lock()

    async def get(self, episode_id: str) -> ProgressRecord | None:
        """Get the last recorded position of an episode, if any."""
        return (await self.all()).get(episode_id)

    async def all(self) -> dict[str, ProgressRecord]:
        """Get the whole progress collection."""
        try:
            return await self._load()
        except (aiosqlite.Error, ValueError) as e:
            _log.warning("Could not read listening progress: %s", e)
            return {}

    async def set(self, episode_id: str, record: ProgressRecord) -> None:
        """Record the position of an episode."""
        async with self._write_lock:
            try:
                collection = await self._load()
            except ValueError as e:
                # Replace an undecodable collection rather than stop recording
                _log.warning("Discarding unreadable listening progress: %s", e)
                collection = {}
            except aiosqlite.Error as e:
                _log.warning("Could not read listening progress: %s", e)
                return

            collection[episode_id] = record
            try:
                await self._db.set(
                    LISTENING_PROGRESS_KEY, _COLLECTION.dump_json(collection).decode()
                )
            except aiosqlite.Error as e:
                _log.warning("Could not save progress for %s: %s", episode_id, e)

    async def reset_all(self) -> None:
        """Forget the progress of every episode."""
        async with self._write_lock:
            try:
                await self._db.delete(LISTENING_PROGRESS_KEY)
            except aiosqlite.Error as e:
                _log.warning("Could not reset listening progress: %s", e)
                return
        _log.info("Listening history reset")

    async def _load(self) -> dict[str, ProgressRecord]:
        raw = await self._db.get(LISTENING_PROGRESS_KEY)
        if raw is None:
            return {}
        return _COLLECTION.validate_json(raw)
