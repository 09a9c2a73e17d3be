"""Genre names of the show catalog."""

from __future__ import annotations

GENRES: dict[int, str] = {
    1: "Personal Growth",
    2: "True Crime",
    3: "History",
    4: "Comedy",
    5: "Entertainment",
    6: "Business",
    7: "Fiction",
    8: "News",
    9: "Kids",
}


def genre_name(genre: int | str) -> str:
    """Return the display name of a catalog genre.

    The catalog index uses numeric ids while show details may carry names
    already; names pass through unchanged.
    """
    if isinstance(genre, int):
        return GENRES.get(genre, f"Genre {genre}")
    return genre


def genre_names(genres: list[int | str]) -> list[str]:
    """Display names for a list of genres, in order."""
    return [genre_name(g) for g in genres]
