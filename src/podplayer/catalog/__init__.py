"""Show catalog access and filtering for podplayer."""

from podplayer.catalog.client import (
    DEFAULT_CATALOG_URL,
    CatalogClient,
    CatalogError,
    CatalogFetchError,
    CatalogParseError,
)
from podplayer.catalog.filters import (
    FavoriteSort,
    ShowFilters,
    ShowSort,
    arrange_favorites,
    available_genres,
    favorite_genres,
    filter_shows,
    recommend,
)
from podplayer.catalog.genres import GENRES, genre_name, genre_names

__all__ = [
    "DEFAULT_CATALOG_URL",
    "GENRES",
    "CatalogClient",
    "CatalogError",
    "CatalogFetchError",
    "CatalogParseError",
    "FavoriteSort",
    "ShowFilters",
    "ShowSort",
    "arrange_favorites",
    "available_genres",
    "favorite_genres",
    "filter_shows",
    "genre_name",
    "genre_names",
    "recommend",
]
