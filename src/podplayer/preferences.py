"""Persisted user preferences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import aiosqlite

from podplayer.database import THEME_KEY
from podplayer.logging import get_logger

if TYPE_CHECKING:
    from podplayer.database import Database

_log = get_logger("preferences")

Theme = Literal["light", "dark"]

# Textual theme names for each theme
TEXTUAL_THEMES: dict[str, str] = {
    "light": "textual-light",
    "dark": "textual-dark",
}


class ThemePreference:
    """The light/dark choice, stored under its own key."""

    def __init__(self, database: Database, default: Theme = "light") -> None:
        """Initialize the preference.

        Args:
            database: Connected key-value database.
            default: Theme used until one is saved.
        """
        self._db = database
        self._default: Theme = default

    async def load(self) -> Theme:
        """Get the saved theme, or the default."""
        try:
            raw = await self._db.get(THEME_KEY)
        except aiosqlite.Error as e:
            _log.warning("Could not read theme: %s", e)
            return self._default
        if raw == '"dark"':
            return "dark"
        if raw == '"light"':
            return "light"
        return self._default

    async def save(self, theme: Theme) -> None:
        """Persist a theme."""
        try:
            await self._db.set(THEME_KEY, f'"{theme}"')
        except aiosqlite.Error as e:
            _log.warning("Could not save theme: %s", e)

    async def toggle(self) -> Theme:
        """Switch between light and dark and persist the result."""
        theme: Theme = "light" if await self.load() == "dark" else "dark"
        await self.save(theme)
        return theme
