"""Screen definitions for podplayer."""

from podplayer.screens.favorites import FavoritesScreen
from podplayer.screens.home import HomeScreen
from podplayer.screens.settings import SettingsScreen
from podplayer.screens.show import ShowScreen

__all__ = ["FavoritesScreen", "HomeScreen", "SettingsScreen", "ShowScreen"]
