"""Data models for podplayer."""

from podplayer.models.catalog import (
    CatalogEpisode,
    FavoriteEpisode,
    Season,
    Show,
    ShowPreview,
    derive_episode_id,
)
from podplayer.models.session import (
    PlayRequest,
    ProgressRecord,
    QueueEntry,
    SessionSnapshot,
    Track,
)

__all__ = [
    "CatalogEpisode",
    "FavoriteEpisode",
    "PlayRequest",
    "ProgressRecord",
    "QueueEntry",
    "Season",
    "SessionSnapshot",
    "Show",
    "ShowPreview",
    "Track",
    "derive_episode_id",
]
