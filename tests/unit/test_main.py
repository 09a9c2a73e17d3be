"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from podplayer.__main__ import cmd_now_playing, cmd_reset_history, main
from podplayer.database import get_database
from podplayer.models import ProgressRecord, QueueEntry, Track
from podplayer.session import ProgressStore, SnapshotStore


async def _seed(data_path: Path, queue: tuple[QueueEntry, ...]) -> None:
    async with get_database(data_path / "podplayer.db") as db:
        track = Track(id="ep-2", url="https://cdn.example.com/ep-2.mp3", title="Episode 2")
        await SnapshotStore(db).save(track, queue)
        progress = ProgressStore(db)
        await progress.set("ep-1", ProgressRecord(time=60, duration=60))
        await progress.set("ep-2", ProgressRecord(time=95, duration=1800))


class TestMain:
    """Tests for argument handling."""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the version."""
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == "podplayer 0.1.0"

    def test_unknown_command(self) -> None:
        """Test an unknown command is rejected."""
        with pytest.raises(SystemExit):
            main(["rewind"])


class TestResetHistory:
    """Tests for the reset-history command."""

    async def test_no_database(
        self, temp_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test resetting before anything was played."""
        assert await cmd_reset_history(temp_dir) == 0
        assert "No listening history" in capsys.readouterr().out

    async def test_reset(
        self,
        temp_dir: Path,
        queue: tuple[QueueEntry, ...],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test progress is cleared and the snapshot kept."""
        await _seed(temp_dir, queue)

        assert await cmd_reset_history(temp_dir) == 0
        assert "Reset listening progress of 2 episodes." in capsys.readouterr().out

        async with get_database(temp_dir / "podplayer.db") as db:
            assert await ProgressStore(db).all() == {}
            assert await SnapshotStore(db).load() is not None


class TestNowPlaying:
    """Tests for the now-playing command."""

    async def test_nothing_playing(
        self, temp_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the command fails when there is no session."""
        assert await cmd_now_playing(temp_dir) == 1
        assert "Nothing playing." in capsys.readouterr().err

    async def test_now_playing(
        self,
        temp_dir: Path,
        queue: tuple[QueueEntry, ...],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the persisted session is described."""
        await _seed(temp_dir, queue)

        assert await cmd_now_playing(temp_dir) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Episode 2",
            "  https://cdn.example.com/ep-2.mp3",
            "  1:35 / 30:00",
            "  Episode 2 of 3 in queue",
        ]
