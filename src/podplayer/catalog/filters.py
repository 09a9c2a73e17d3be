"""Search, genre and sort filtering of shows and favorites."""

from __future__ import annotations

import random
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from podplayer.catalog.genres import genre_names

if TYPE_CHECKING:
    from collections.abc import Sequence

    from podplayer.models import FavoriteEpisode, ShowPreview

UNKNOWN_SHOW = "Unknown Show"

_OLDEST = datetime.min


class ShowSort(Enum):
    """Sort orders of the show directory."""

    NEWEST = "newest"
    TITLE_AZ = "az"
    TITLE_ZA = "za"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return {
            ShowSort.NEWEST: "Recently Updated",
            ShowSort.TITLE_AZ: "A-Z",
            ShowSort.TITLE_ZA: "Z-A",
        }[self]


class FavoriteSort(Enum):
    """Sort orders of the favorites list."""

    TITLE_AZ = "az"
    TITLE_ZA = "za"
    NEWEST = "newest"
    OLDEST = "oldest"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return {
            FavoriteSort.TITLE_AZ: "Title A-Z",
            FavoriteSort.TITLE_ZA: "Title Z-A",
            FavoriteSort.NEWEST: "Newest",
            FavoriteSort.OLDEST: "Oldest",
        }[self]


class ShowFilters(BaseModel):
    """Filters applied to the show directory."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    genre: str = ""
    sort: ShowSort = ShowSort.NEWEST

    @property
    def is_default(self) -> bool:
        """Whether no filter narrows or reorders the directory."""
        return self == ShowFilters()


def _naive(value: datetime | None) -> datetime:
    if value is None:
        return _OLDEST
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=None)


def filter_shows(
    shows: Sequence[ShowPreview], filters: ShowFilters
) -> list[ShowPreview]:
    """Apply search, genre and sort filters.

    Args:
        shows: Shows in catalog order.
        filters: Filters to apply.

    Returns:
        The matching shows in the requested order.
    """
    needle = filters.search.casefold()
    matches = [
        show
        for show in shows
        if needle in show.title.casefold()
        and (not filters.genre or filters.genre in genre_names(show.genres))
    ]

    if filters.sort == ShowSort.NEWEST:
        return sorted(matches, key=lambda show: _naive(show.updated), reverse=True)
    if filters.sort == ShowSort.TITLE_AZ:
        return sorted(matches, key=lambda show: show.title.casefold())
    return sorted(matches, key=lambda show: show.title.casefold(), reverse=True)


def available_genres(shows: Sequence[ShowPreview]) -> list[str]:
    """Genre names present in the shows, in first-seen order."""
    seen: dict[str, None] = {}
    for show in shows:
        for name in genre_names(show.genres):
            seen.setdefault(name, None)
    return list(seen)


def recommend(
    shows: Sequence[ShowPreview],
    count: int,
    rng: random.Random | None = None,
) -> list[ShowPreview]:
    """Pick a random selection of shows.

    Args:
        shows: Shows to pick from.
        count: Maximum number of shows.
        rng: Random source, for reproducible picks.

    Returns:
        Up to ``count`` distinct shows.
    """
    rng = rng or random.Random()
    return rng.sample(list(shows), min(count, len(shows)))


def favorite_genres(favorites: Sequence[FavoriteEpisode]) -> list[str]:
    """Genre names present in the favorites, in first-seen order."""
    seen: dict[str, None] = {}
    for favorite in favorites:
        for name in genre_names(favorite.genres):
            seen.setdefault(name, None)
    return list(seen)


def arrange_favorites(
    favorites: Sequence[FavoriteEpisode],
    sort: FavoriteSort = FavoriteSort.TITLE_AZ,
    genre: str = "",
) -> dict[str, list[FavoriteEpisode]]:
    """Sort, filter and group favorites by show.

    Args:
        favorites: Saved favorites.
        sort: Order within and across groups.
        genre: Only keep favorites of this genre name; empty keeps all.

    Returns:
        Favorites grouped by show title, groups in order of first appearance.
    """
    if sort == FavoriteSort.TITLE_AZ:
        ordered = sorted(favorites, key=lambda f: f.title.casefold())
    elif sort == FavoriteSort.TITLE_ZA:
        ordered = sorted(favorites, key=lambda f: f.title.casefold(), reverse=True)
    elif sort == FavoriteSort.NEWEST:
        ordered = sorted(favorites, key=lambda f: _naive(f.added_at), reverse=True)
    else:
        ordered = sorted(favorites, key=lambda f: _naive(f.added_at))

    groups: dict[str, list[FavoriteEpisode]] = {}
    for favorite in ordered:
        if genre and genre not in genre_names(favorite.genres):
            continue
        groups.setdefault(favorite.show_title or UNKNOWN_SHOW, []).append(favorite)
    return groups
