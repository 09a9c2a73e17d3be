"""Async SQLite key-value store for podplayer."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

# Every durable value is a JSON document under a single key
SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""

# Keys owned by the playback session
CURRENT_TRACK_KEY = "current_track"
CURRENT_QUEUE_KEY = "current_queue"
LISTENING_PROGRESS_KEY = "listening_progress"

# Keys owned by the catalog collaborators
FAVORITES_KEY = "favorites"
THEME_KEY = "theme"


class Database:
    """Async SQLite database holding JSON values by key."""

    def __init__(self, path: Path) -> None:
        """Initialize the database.

        Args:
            path: Path to the SQLite database file.
        """
        self.path = path
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        """Connect to the database and ensure schema exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = await aiosqlite.connect(self.path)
        self._conn.row_factory = aiosqlite.Row
        await self._conn.executescript(SCHEMA)
        await self._conn.commit()

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    @property
    def is_connected(self) -> bool:
        """Whether the connection is open."""
        return self._conn is not None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Context manager for database transactions."""
        if self._conn is None:
            raise RuntimeError("Database not connected")
        async with self._lock:
            try:
                yield self._conn
                await self._conn.commit()
            except Exception:
                await self._conn.rollback()
                raise

    async def get(self, key: str) -> str | None:
        """Get the raw value stored under a key."""
        if self._conn is None:
            raise RuntimeError("Database not connected")

        async with self._conn.execute(
            "SELECT value FROM kv WHERE key = ?", (key,)
        ) as cursor:
            row = await cursor.fetchone()

        return row["value"] if row else None

    async def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under a key."""
        async with self.transaction() as conn:
            await conn.execute(
                """
                INSERT INTO kv (key, value, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    async def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error."""
        async with self.transaction() as conn:
            await conn.execute("DELETE FROM kv WHERE key = ?", (key,))

    async def keys(self) -> list[str]:
        """Get all stored keys in alphabetical order."""
        if self._conn is None:
            raise RuntimeError("Database not connected")

        async with self._conn.execute("SELECT key FROM kv ORDER BY key") as cursor:
            rows = await cursor.fetchall()

        return [row["key"] for row in rows]


@asynccontextmanager
async def get_database(path: Path) -> AsyncIterator[Database]:
    """Context manager for database access.

    Args:
        path: Path to the SQLite database file.

    Yields:
        Connected database instance.
    """
    db = Database(path)
    await db.connect()
    try:
        yield db
    finally:
        await db.close()
