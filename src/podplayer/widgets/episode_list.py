"""Season and episode list widgets for a show."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from podplayer.models import CatalogEpisode, ProgressRecord, Season


class SeasonSelected(Message):
    """Message sent when a season is highlighted."""

    bubble = True

    def __init__(self, season: Season) -> None:
        """Initialize the message.

        Args:
            season: The selected season.
        """
        self.season = season
        super().__init__()


class EpisodeSelected(Message):
    """Message sent when an episode is selected for playback."""

    bubble = True

    def __init__(self, season: Season, episode: CatalogEpisode) -> None:
        """Initialize the message.

        Args:
            season: Season the episode belongs to.
            episode: The selected episode.
        """
        self.season = season
        self.episode = episode
        super().__init__()


class SeasonList(OptionList):
    """List of a show's seasons."""

    DEFAULT_CSS = """
    SeasonList {
        width: 30;
        height: 1fr;
        border: solid $primary;
    }

    SeasonList:focus {
        border: solid $accent;
    }
    """

    def __init__(self) -> None:
        """Initialize the season list."""
        super().__init__()
        self._seasons: list[Season] = []

    def set_seasons(self, seasons: list[Season]) -> None:
        """Set the seasons to display.

        Args:
            seasons: Seasons in catalog order.
        """
        self._seasons = seasons
        self.clear_options()
        for season in seasons:
            title = season.title or f"Season {season.season}"
            self.add_option(Option(f"{title} ({len(season.episodes)})"))

    def get_selected_season(self) -> Season | None:
        """Get the highlighted season."""
        if self.highlighted is None or not self._seasons:
            return None
        if 0 <= self.highlighted < len(self._seasons):
            return self._seasons[self.highlighted]
        return None

    def on_option_list_option_highlighted(
        self, _event: OptionList.OptionHighlighted
    ) -> None:
        """Show the episodes of the season under the cursor."""
        season = self.get_selected_season()
        if season:
            self.post_message(SeasonSelected(season))


class EpisodeList(OptionList):
    """Episodes of one season with inline progress and favorite markers."""

    DEFAULT_CSS = """
    EpisodeList {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
    }

    EpisodeList:focus {
        border: solid $accent;
    }

    EpisodeList > .option-list--option-highlighted {
        background: $accent;
    }
    """

    def __init__(self) -> None:
        """Initialize the episode list."""
        super().__init__()
        self._season: Season | None = None

    @property
    def season(self) -> Season | None:
        """Season whose episodes are displayed."""
        return self._season

    def set_episodes(
        self,
        season: Season,
        progress: Mapping[str, ProgressRecord],
        favorites: Collection[str],
    ) -> None:
        """Display a season's episodes.

        Args:
            season: The season to display.
            progress: Listening progress by episode id.
            favorites: Ids of favorite episodes.
        """
        highlighted = self.highlighted if self._season is season else None
        self._season = season
        self.clear_options()
        for episode in season.episodes:
            episode_id = season.episode_id(episode)
            self.add_option(
                Option(
                    self.format_episode(
                        episode,
                        progress.get(episode_id),
                        favorite=episode_id in favorites,
                    )
                )
            )
        if highlighted is not None and highlighted < len(season.episodes):
            self.highlighted = highlighted

    @staticmethod
    def format_episode(
        episode: CatalogEpisode,
        record: ProgressRecord | None,
        *,
        favorite: bool = False,
    ) -> str:
        """Render one row: favorite marker, number, title and progress."""
        marker = "★" if favorite else " "
        number = f"{episode.episode}. " if episode.episode is not None else ""
        line = f"{marker} {number}{episode.title}"
        if not episode.file:
            line += "  (no audio)"
        elif record is not None and record.duration > 0:
            line += f"  {round(record.fraction * 100)}%"
        return line

    def get_selected_episode(self) -> CatalogEpisode | None:
        """Get the highlighted episode."""
        if self.highlighted is None or self._season is None:
            return None
        episodes = self._season.episodes
        if 0 <= self.highlighted < len(episodes):
            return episodes[self.highlighted]
        return None

    def on_option_list_option_selected(self, _event: OptionList.OptionSelected) -> None:
        """Handle option selection."""
        episode = self.get_selected_episode()
        if episode and self._season:
            self.post_message(EpisodeSelected(self._season, episode))
