"""Tests for podplayer data models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from podplayer.models import (
    CatalogEpisode,
    FavoriteEpisode,
    PlayRequest,
    ProgressRecord,
    QueueEntry,
    Season,
    Show,
    ShowPreview,
    Track,
    derive_episode_id,
)


class TestDeriveEpisodeId:
    """Tests for derive_episode_id."""

    def test_native_id_wins(self) -> None:
        """Test that the catalog id is used when present."""
        assert derive_episode_id("Pilot", 1, 1, native_id="abc", uuid="u-1") == "abc"

    def test_uuid_before_composite(self) -> None:
        """Test that the uuid is used when there is no id."""
        assert derive_episode_id("Pilot", 1, 1, uuid="u-1") == "u-1"

    def test_composite(self) -> None:
        """Test the title-season-episode composite."""
        assert derive_episode_id("Pilot", 2, 7) == "Pilot-2-7"

    def test_missing_numbers_render_empty(self) -> None:
        """Test that missing numbers become empty segments."""
        assert derive_episode_id("Pilot", None, None) == "Pilot--"
        assert derive_episode_id("Pilot", 3, None) == "Pilot-3-"

    def test_stable_across_calls(self) -> None:
        """Test the same episode always maps to the same id."""
        ids = {derive_episode_id("The Cycle", 1, 1) for _ in range(5)}
        assert ids == {"The Cycle-1-1"}

    def test_empty_native_id_ignored(self) -> None:
        """Test that empty identifiers fall through to the composite."""
        assert derive_episode_id("Pilot", 1, 2, native_id="", uuid="") == "Pilot-1-2"


class TestProgressRecord:
    """Tests for ProgressRecord."""

    def test_fraction(self) -> None:
        """Test listened fraction."""
        assert ProgressRecord(time=30, duration=120).fraction == 0.25

    def test_fraction_unknown_duration(self) -> None:
        """Test fraction is zero without a duration."""
        assert ProgressRecord(time=30, duration=0).fraction == 0.0

    def test_fraction_capped(self) -> None:
        """Test fraction never exceeds one."""
        assert ProgressRecord(time=130, duration=120).fraction == 1.0

    def test_negative_values_rejected(self) -> None:
        """Test that negative times are invalid."""
        with pytest.raises(ValidationError):
            ProgressRecord(time=-1, duration=10)
        with pytest.raises(ValidationError):
            ProgressRecord(time=1, duration=-10)


class TestPlayRequest:
    """Tests for PlayRequest."""

    def test_from_entry_keeps_queue(self, queue: tuple[QueueEntry, ...]) -> None:
        """Test building a request from a queue entry."""
        request = PlayRequest.from_entry(queue[1], queue)
        assert request.id == "ep-2"
        assert request.url == "https://cdn.example.com/ep-2.mp3"
        assert request.queue == queue

    def test_to_track(self) -> None:
        """Test the track a request asks for."""
        request = PlayRequest(url="u", id="x", title="T", image="i")
        assert request.to_track() == Track(id="x", url="u", title="T", image="i")

    def test_url_may_be_empty(self) -> None:
        """Test malformed requests are representable."""
        assert PlayRequest(id="x").url == ""

    def test_frozen(self) -> None:
        """Test that requests are immutable."""
        request = PlayRequest(id="x")
        with pytest.raises(ValidationError):
            request.id = "y"  # type: ignore[misc]


class TestCatalogModels:
    """Tests for the catalog models."""

    def test_preview_parses_index_payload(self, sample_previews: list[dict[str, Any]]) -> None:
        """Test parsing a show preview."""
        preview = ShowPreview.model_validate(sample_previews[0])
        assert preview.id == "10716"
        assert preview.genres == [2, 5]
        assert preview.updated == datetime(2022, 11, 3, 7, tzinfo=UTC)

    def test_show_parses_detail_payload(self, sample_show: dict[str, Any]) -> None:
        """Test parsing a full show."""
        show = Show.model_validate(sample_show)
        assert len(show.seasons) == 2
        assert show.episode_count == 3
        assert show.seasons[0].episodes[1].title == "The Call"

    def test_season_queue_uses_derived_ids(self, sample_show: dict[str, Any]) -> None:
        """Test a season queue addresses episodes by derived id."""
        season = Show.model_validate(sample_show).seasons[0]
        queue = season.queue()
        assert [entry.id for entry in queue] == ["The Cycle-1-1", "The Call-1-2"]
        assert queue[0].image == "https://cdn.example.com/swr-s1.jpg"

    def test_season_queue_falls_back_to_show_image(
        self, sample_show: dict[str, Any]
    ) -> None:
        """Test a season without artwork uses the show's."""
        show = Show.model_validate(sample_show)
        queue = show.seasons[1].queue(fallback_image=show.image)
        assert queue[0].image == show.image

    def test_play_request_carries_season_queue(self, sample_show: dict[str, Any]) -> None:
        """Test playing an episode queues its whole season."""
        show = Show.model_validate(sample_show)
        season = show.seasons[0]
        request = show.play_request(season, season.episodes[1])
        assert request.id == "The Call-1-2"
        assert request.url == "https://cdn.example.com/s1e2.mp3"
        assert [entry.id for entry in request.queue] == ["The Cycle-1-1", "The Call-1-2"]

    def test_episode_native_id(self) -> None:
        """Test that an episode's own id is used when supplied."""
        season = Season(season=1, episodes=[CatalogEpisode(title="A", id="native")])
        assert season.episode_id(season.episodes[0]) == "native"


class TestFavoriteEpisode:
    """Tests for FavoriteEpisode."""

    def test_same_id_as_progress(self, sample_show: dict[str, Any]) -> None:
        """Test favorites and play requests share the episode id."""
        show = Show.model_validate(sample_show)
        season = show.seasons[0]
        episode = season.episodes[0]
        favorite = FavoriteEpisode.from_catalog(
            show, season, episode, added_at=datetime(2024, 1, 1, tzinfo=UTC)
        )
        assert favorite.id == show.play_request(season, episode).id
        assert favorite.show_title == "Something Was Wrong"
        assert favorite.season_number == 1
        assert favorite.episode_number == 1
        assert favorite.genres == ["True Crime", "Entertainment"]

    def test_to_queue_entry(self) -> None:
        """Test a favorite becomes a queue entry."""
        favorite = FavoriteEpisode(
            id="x", title="T", file="f.mp3", added_at=datetime(2024, 1, 1, tzinfo=UTC)
        )
        assert favorite.to_queue_entry() == QueueEntry(id="x", file="f.mp3", title="T")
