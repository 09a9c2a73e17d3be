"""Integration tests for favorites and preferences."""

from datetime import UTC, datetime

import pytest

from podplayer.database import FAVORITES_KEY, THEME_KEY, Database
from podplayer.favorites import FavoritesStore
from podplayer.models import FavoriteEpisode
from podplayer.preferences import ThemePreference


def _favorite(episode_id: str) -> FavoriteEpisode:
    return FavoriteEpisode(
        id=episode_id,
        title=f"Title {episode_id}",
        show_title="Show",
        file=f"https://cdn.example.com/{episode_id}.mp3",
        added_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def favorites(database: Database) -> FavoritesStore:
    """Favorites over the test database."""
    return FavoritesStore(database)


class TestFavoritesStore:
    """Tests for FavoritesStore."""

    async def test_empty(self, favorites: FavoritesStore):
        """Test no favorites yet."""
        assert await favorites.all() == []
        assert not await favorites.is_favorite("a")

    async def test_toggle_adds_and_removes(self, favorites: FavoritesStore):
        """Test toggling an episode twice."""
        assert await favorites.toggle(_favorite("a"))
        assert await favorites.is_favorite("a")

        assert not await favorites.toggle(_favorite("a"))
        assert not await favorites.is_favorite("a")

    async def test_insertion_order(self, favorites: FavoritesStore):
        """Test favorites are listed in the order they were added."""
        for episode_id in ("b", "a", "c"):
            await favorites.toggle(_favorite(episode_id))
        assert [f.id for f in await favorites.all()] == ["b", "a", "c"]
        assert await favorites.ids() == {"a", "b", "c"}

    async def test_remove(self, favorites: FavoritesStore):
        """Test removing one favorite keeps the others."""
        await favorites.toggle(_favorite("a"))
        await favorites.toggle(_favorite("b"))
        await favorites.remove("a")
        await favorites.remove("missing")
        assert [f.id for f in await favorites.all()] == ["b"]

    async def test_durable(self, favorites: FavoritesStore, database: Database):
        """Test a new store sees saved favorites."""
        await favorites.toggle(_favorite("a"))
        assert [f.id for f in await FavoritesStore(database).all()] == ["a"]

    async def test_corrupt(self, favorites: FavoritesStore, database: Database):
        """Test an unreadable collection reads as empty."""
        await database.set(FAVORITES_KEY, "{broken")
        assert await favorites.all() == []


class TestThemePreference:
    """Tests for ThemePreference."""

    async def test_default(self, database: Database):
        """Test the default is used until a theme is saved."""
        assert await ThemePreference(database).load() == "light"
        assert await ThemePreference(database, default="dark").load() == "dark"

    async def test_save_as_json_string(self, database: Database):
        """Test the theme is stored as a JSON string."""
        await ThemePreference(database).save("dark")
        assert await database.get(THEME_KEY) == '"dark"'
        assert await ThemePreference(database).load() == "dark"

    async def test_toggle(self, database: Database):
        """Test toggling flips and persists."""
        preference = ThemePreference(database)
        assert await preference.toggle() == "dark"
        assert await preference.toggle() == "light"
        assert await database.get(THEME_KEY) == '"light"'

    async def test_unknown_value(self, database: Database):
        """Test an unexpected stored value falls back to the default."""
        await database.set(THEME_KEY, '"sepia"')
        assert await ThemePreference(database).load() == "light"
