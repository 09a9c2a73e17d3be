"""Playback session models for podplayer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Track(BaseModel):
    """The episode currently owned by the playback session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable episode identifier")
    url: str = Field(description="Playable audio resource")
    title: str = Field(default="", description="Episode title")
    image: str = Field(default="", description="Cover image URL")


class QueueEntry(BaseModel):
    """An episode in the queue that accompanies the current track."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable episode identifier")
    file: str = Field(default="", description="Playable audio resource")
    title: str = Field(default="", description="Episode title")
    image: str = Field(default="", description="Cover image URL")


class PlayRequest(BaseModel):
    """Payload of a ``play-audio`` event published by a view."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(default="", description="Playable audio resource")
    id: str = Field(description="Stable episode identifier")
    title: str = Field(default="", description="Episode title")
    image: str = Field(default="", description="Cover image URL")
    queue: tuple[QueueEntry, ...] = Field(
        default=(), description="Ordered episodes to navigate with next/prev"
    )

    @classmethod
    def from_entry(
        cls, entry: QueueEntry, queue: tuple[QueueEntry, ...]
    ) -> PlayRequest:
        """Build a request that plays a queue entry within the given queue."""
        return cls(
            url=entry.file,
            id=entry.id,
            title=entry.title,
            image=entry.image,
            queue=queue,
        )

    def to_track(self) -> Track:
        """Return the track this request asks to play."""
        return Track(id=self.id, url=self.url, title=self.title, image=self.image)


class ProgressRecord(BaseModel):
    """Last known playback position of one episode, in seconds."""

    model_config = ConfigDict(frozen=True)

    time: float = Field(default=0.0, ge=0.0, description="Position in seconds")
    duration: float = Field(default=0.0, ge=0.0, description="Duration in seconds")

    @property
    def fraction(self) -> float:
        """Listened fraction (0.0-1.0), 0.0 when the duration is unknown."""
        if self.duration <= 0:
            return 0.0
        return min(1.0, self.time / self.duration)


class SessionSnapshot(BaseModel):
    """What was playing, persisted independently of how far into it."""

    model_config = ConfigDict(frozen=True)

    current_track: Track
    queue: tuple[QueueEntry, ...] = ()
