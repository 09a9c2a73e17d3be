"""Tests for queue navigation."""

from __future__ import annotations

from podplayer.models import QueueEntry
from podplayer.session.queue import index_of, predecessor, successor


class TestQueueNavigation:
    """Tests for index_of, successor and predecessor."""

    def test_index_of(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test finding an entry by id."""
        assert index_of(queue, "ep-2") == 1
        assert index_of(queue, "missing") is None

    def test_index_of_first_match(self) -> None:
        """Test duplicate ids resolve to the first entry."""
        queue = (QueueEntry(id="a", title="one"), QueueEntry(id="a", title="two"))
        assert index_of(queue, "a") == 0

    def test_successor(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test the entry after an episode."""
        entry = successor(queue, "ep-1")
        assert entry is not None
        assert entry.id == "ep-2"

    def test_successor_at_end(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test there is nothing after the last entry."""
        assert successor(queue, "ep-3") is None

    def test_predecessor(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test the entry before an episode."""
        entry = predecessor(queue, "ep-3")
        assert entry is not None
        assert entry.id == "ep-2"

    def test_predecessor_at_start(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test there is nothing before the first entry."""
        assert predecessor(queue, "ep-1") is None

    def test_absent_id(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test navigation from an episode not in the queue."""
        assert successor(queue, "missing") is None
        assert predecessor(queue, "missing") is None

    def test_empty_queue(self) -> None:
        """Test navigation in an empty queue."""
        assert successor((), "ep-1") is None
        assert predecessor((), "ep-1") is None
