"""Custom widgets for podplayer."""

from podplayer.widgets.confirm_dialog import ConfirmDialog
from podplayer.widgets.episode_list import (
    EpisodeList,
    EpisodeSelected,
    SeasonList,
    SeasonSelected,
)
from podplayer.widgets.favorite_list import FavoriteList, FavoriteSelected
from podplayer.widgets.player_bar import PlayerBar
from podplayer.widgets.show_list import ShowList, ShowSelected

__all__ = [
    "ConfirmDialog",
    "EpisodeList",
    "EpisodeSelected",
    "FavoriteList",
    "FavoriteSelected",
    "PlayerBar",
    "SeasonList",
    "SeasonSelected",
    "ShowList",
    "ShowSelected",
]
