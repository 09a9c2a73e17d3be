"""Fixtures for running the application under the Textual pilot."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import respx

from podplayer.app import PodplayerApp
from podplayer.catalog import DEFAULT_CATALOG_URL
from podplayer.config import Config, PlayerConfig
from podplayer.player import NullPlayer


@pytest.fixture
def catalog_api(
    sample_previews: list[dict[str, Any]], sample_show: dict[str, Any]
) -> Iterator[respx.MockRouter]:
    """Serve the sample catalog instead of the network."""
    with respx.mock(base_url=DEFAULT_CATALOG_URL, assert_all_called=False) as router:
        router.get("/shows", name="shows").respond(200, json=sample_previews)
        router.get("/id/10716", name="show").respond(200, json=sample_show)
        yield router


@pytest.fixture
def app_player() -> NullPlayer:
    """Silent transport driven by the tests."""
    return NullPlayer(duration_ms=60000)


@pytest.fixture
def app(
    temp_dir: Path, app_player: NullPlayer, catalog_api: respx.MockRouter
) -> PodplayerApp:
    """Application over a temporary data directory and the sample catalog."""
    return PodplayerApp(
        config=Config(player=PlayerConfig(backend="null")),
        data_path=temp_dir,
        player=app_player,
    )
