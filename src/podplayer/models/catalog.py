"""Show catalog models for podplayer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from podplayer.models.session import PlayRequest, QueueEntry


def derive_episode_id(
    title: str,
    season_number: int | None,
    episode_number: int | None,
    *,
    native_id: str | None = None,
    uuid: str | None = None,
) -> str:
    """Return the stable identifier of an episode.

    The catalog id wins, then its uuid, then a composite of title, season
    and episode number. Favorites, listening progress and queue navigation
    all address episodes through this function.

    Args:
        title: Episode title.
        season_number: Season the episode belongs to.
        episode_number: Episode number within the season.
        native_id: Identifier supplied by the catalog, if any.
        uuid: UUID supplied by the catalog, if any.

    Returns:
        The episode identifier.
    """
    if native_id:
        return str(native_id)
    if uuid:
        return str(uuid)
    season = "" if season_number is None else str(season_number)
    episode = "" if episode_number is None else str(episode_number)
    return f"{title}-{season}-{episode}"


class ShowPreview(BaseModel):
    """A show as listed by the catalog index."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    image: str = ""
    genres: list[int | str] = Field(default_factory=list)
    seasons: int = 0
    updated: datetime | None = None


class CatalogEpisode(BaseModel):
    """An episode as delivered by the catalog."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    episode: int | None = None
    file: str = ""
    id: str | None = None
    uuid: str | None = None
    date: str | None = None


class Season(BaseModel):
    """A season of a show with its episodes in catalog order."""

    model_config = ConfigDict(frozen=True)

    season: int
    title: str = ""
    image: str = ""
    episodes: list[CatalogEpisode] = Field(default_factory=list)

    def episode_id(self, episode: CatalogEpisode) -> str:
        """Identifier of one of this season's episodes."""
        return derive_episode_id(
            episode.title,
            self.season,
            episode.episode,
            native_id=episode.id,
            uuid=episode.uuid,
        )

    def queue(self, fallback_image: str = "") -> tuple[QueueEntry, ...]:
        """Return the season's episodes as a playback queue."""
        image = self.image or fallback_image
        return tuple(
            QueueEntry(
                id=self.episode_id(episode),
                file=episode.file,
                title=episode.title,
                image=image,
            )
            for episode in self.episodes
        )


class Show(BaseModel):
    """A show with its seasons, as returned by the catalog detail endpoint."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    image: str = ""
    genres: list[int | str] = Field(default_factory=list)
    updated: datetime | None = None
    seasons: list[Season] = Field(default_factory=list)

    @property
    def episode_count(self) -> int:
        """Total number of episodes across all seasons."""
        return sum(len(season.episodes) for season in self.seasons)

    def play_request(self, season: Season, episode: CatalogEpisode) -> PlayRequest:
        """Build the request that plays an episode with its season as queue."""
        return PlayRequest(
            url=episode.file,
            id=season.episode_id(episode),
            title=episode.title,
            image=season.image or self.image,
            queue=season.queue(fallback_image=self.image),
        )


class FavoriteEpisode(BaseModel):
    """An episode saved to the favorites collection."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    show_id: str = ""
    show_title: str = ""
    season_number: int | None = None
    episode_number: int | None = None
    file: str = ""
    image: str = ""
    genres: list[int | str] = Field(default_factory=list)
    added_at: datetime

    @classmethod
    def from_catalog(
        cls,
        show: Show,
        season: Season,
        episode: CatalogEpisode,
        added_at: datetime,
    ) -> FavoriteEpisode:
        """Create a favorite from a catalog episode."""
        return cls(
            id=season.episode_id(episode),
            title=episode.title,
            show_id=show.id,
            show_title=show.title,
            season_number=season.season,
            episode_number=episode.episode,
            file=episode.file,
            image=season.image or show.image,
            genres=list(show.genres),
            added_at=added_at,
        )

    def to_queue_entry(self) -> QueueEntry:
        """Return this favorite as a queue entry."""
        return QueueEntry(id=self.id, file=self.file, title=self.title, image=self.image)
