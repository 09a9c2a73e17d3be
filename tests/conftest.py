"""Pytest configuration and fixtures for podplayer tests."""

from __future__ import annotations

import tempfile
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from podplayer.config import Config
from podplayer.database import Database
from podplayer.models import QueueEntry
from podplayer.player import NullPlayer
from podplayer.session import PlaybackSession, ProgressStore, SessionBus, SnapshotStore


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_db_path(temp_dir: Path) -> Path:
    """Path for a temporary test database."""
    return temp_dir / "test.db"


@pytest_asyncio.fixture
async def database(temp_db_path: Path) -> AsyncIterator[Database]:
    """Create a connected test database."""
    db = Database(temp_db_path)
    await db.connect()
    try:
        yield db
    finally:
        await db.close()


@pytest.fixture
def default_config() -> Config:
    """Create a default configuration."""
    return Config()


@pytest.fixture
def temp_config_path(temp_dir: Path) -> Path:
    """Path for a temporary config file."""
    return temp_dir / "config.toml"


@pytest.fixture
def progress_store(database: Database) -> ProgressStore:
    """Progress store over the test database."""
    return ProgressStore(database)


@pytest.fixture
def snapshot_store(database: Database) -> SnapshotStore:
    """Snapshot store over the test database."""
    return SnapshotStore(database)


@pytest.fixture
def bus() -> SessionBus:
    """A fresh session bus."""
    return SessionBus()


@pytest.fixture
def player() -> NullPlayer:
    """A silent player reporting 60 second episodes."""
    return NullPlayer(duration_ms=60000)


@pytest_asyncio.fixture
async def session(
    bus: SessionBus,
    player: NullPlayer,
    progress_store: ProgressStore,
    snapshot_store: SnapshotStore,
) -> AsyncIterator[PlaybackSession]:
    """A started playback session over a silent player."""
    playback = PlaybackSession(bus, player, progress_store, snapshot_store)
    await playback.start()
    try:
        yield playback
    finally:
        await playback.shutdown()


@pytest.fixture
def queue() -> tuple[QueueEntry, ...]:
    """A three episode queue."""
    return tuple(
        QueueEntry(
            id=f"ep-{n}",
            file=f"https://cdn.example.com/ep-{n}.mp3",
            title=f"Episode {n}",
        )
        for n in (1, 2, 3)
    )


SAMPLE_PREVIEWS: list[dict[str, Any]] = [
    {
        "id": "10716",
        "title": "Something Was Wrong",
        "description": "An award-winning docuseries.",
        "image": "https://cdn.example.com/swr.jpg",
        "genres": [2, 5],
        "seasons": 2,
        "updated": "2022-11-03T07:00:00.000Z",
    },
    {
        "id": "5675",
        "title": "All Things Considered",
        "description": "Daily news.",
        "image": "https://cdn.example.com/atc.jpg",
        "genres": [8],
        "seasons": 1,
        "updated": "2023-01-10T18:00:00.000Z",
    },
    {
        "id": "9177",
        "title": "Big Laughs",
        "description": "Stand-up comedy.",
        "image": "https://cdn.example.com/laughs.jpg",
        "genres": [4],
        "seasons": 1,
        "updated": "2021-06-01T12:00:00.000Z",
    },
]

SAMPLE_SHOW: dict[str, Any] = {
    "id": "10716",
    "title": "Something Was Wrong",
    "description": "An award-winning docuseries.",
    "image": "https://cdn.example.com/swr.jpg",
    "genres": ["True Crime", "Entertainment"],
    "updated": "2022-11-03T07:00:00.000Z",
    "seasons": [
        {
            "season": 1,
            "title": "Season 1",
            "image": "https://cdn.example.com/swr-s1.jpg",
            "episodes": [
                {
                    "title": "The Cycle",
                    "description": "Episode one.",
                    "episode": 1,
                    "file": "https://cdn.example.com/s1e1.mp3",
                },
                {
                    "title": "The Call",
                    "description": "Episode two.",
                    "episode": 2,
                    "file": "https://cdn.example.com/s1e2.mp3",
                },
            ],
        },
        {
            "season": 2,
            "title": "Season 2",
            "image": "",
            "episodes": [
                {
                    "title": "The Return",
                    "description": "Episode one of season two.",
                    "episode": 1,
                    "file": "https://cdn.example.com/s2e1.mp3",
                },
            ],
        },
    ],
}


@pytest.fixture
def sample_previews() -> list[dict[str, Any]]:
    """Catalog index payload."""
    return SAMPLE_PREVIEWS


@pytest.fixture
def sample_show() -> dict[str, Any]:
    """Catalog show detail payload."""
    return SAMPLE_SHOW
