"""Favorite episodes collection."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import aiosqlite
from pydantic import TypeAdapter

from podplayer.database import FAVORITES_KEY
from podplayer.logging import get_logger
from podplayer.models import FavoriteEpisode

if TYPE_CHECKING:
    from podplayer.database import Database

_log = get_logger("favorites")

_COLLECTION = TypeAdapter(list[FavoriteEpisode])


class FavoritesStore:
    """Favorite episodes, addressed by the same ids as listening progress."""

    def __init__(self, database: Database) -> None:
        """Initialize the store.

        Args:
            database: Connected key-value database.
        """
        self._db = database
        self._write_lock = asyncio.Lock()

    async def all(self) -> list[FavoriteEpisode]:
        """Get every favorite in the order they were added."""
        try:
            raw = await self._db.get(FAVORITES_KEY)
            if raw is None:
                return []
            return _COLLECTION.validate_json(raw)
        except (aiosqlite.Error, ValueError) as e:
            _log.warning("Could not read favorites: %s", e)
            return []

    async def ids(self) -> set[str]:
        """Get the ids of every favorite."""
        return {favorite.id for favorite in await self.all()}

    async def is_favorite(self, episode_id: str) -> bool:
        """Check whether an episode is a favorite."""
        return episode_id in await self.ids()

    async def toggle(self, favorite: FavoriteEpisode) -> bool:
        """Add the episode, or remove it when it is already a favorite.

        Returns:
            True if the episode is a favorite afterwards.
        """
        async with self._write_lock:
            favorites = await self.all()
            remaining = [f for f in favorites if f.id != favorite.id]
            added = len(remaining) == len(favorites)
            if added:
                remaining.append(favorite)
            await self._save(remaining)
        return added

    async def remove(self, episode_id: str) -> None:
        """Remove an episode from the favorites."""
        async with self._write_lock:
            favorites = await self.all()
            await self._save([f for f in favorites if f.id != episode_id])

    async def _save(self, favorites: list[FavoriteEpisode]) -> None:
        try:
            await self._db.set(FAVORITES_KEY, _COLLECTION.dump_json(favorites).decode())
        except aiosqlite.Error as e:
            _log.warning("Could not save favorites: %s", e)
