"""Queue navigation by episode id."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from podplayer.models import QueueEntry


def index_of(queue: Sequence[QueueEntry], episode_id: str) -> int | None:
    """Position of the first entry with the given id, or None."""
    for index, entry in enumerate(queue):
        if entry.id == episode_id:
            return index
    return None


def successor(queue: Sequence[QueueEntry], episode_id: str) -> QueueEntry | None:
    """Entry after the given episode; None at the end or when it is absent."""
    index = index_of(queue, episode_id)
    if index is None or index + 1 >= len(queue):
        return None
    return queue[index + 1]


def predecessor(queue: Sequence[QueueEntry], episode_id: str) -> QueueEntry | None:
    """Entry before the given episode; None at the start or when it is absent."""
    index = index_of(queue, episode_id)
    if index is None or index == 0:
        return None
    return queue[index - 1]
