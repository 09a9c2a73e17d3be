"""Entry point for the podplayer application."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run the podplayer application or CLI commands."""
    parser = argparse.ArgumentParser(
        prog="podplayer",
        description="A podcast directory and player for the terminal",
    )
    parser.add_argument(
        "--version", "-v", action="store_true", help="Show version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser(
        "reset-history", help="Forget the listening progress of every episode"
    )
    subparsers.add_parser("now-playing", help="Show the episode that will resume")

    args = parser.parse_args(argv)

    if args.version:
        from podplayer import __version__

        print(f"podplayer {__version__}")
        return 0

    if args.command == "reset-history":
        return asyncio.run(cmd_reset_history())
    elif args.command == "now-playing":
        return asyncio.run(cmd_now_playing())
    else:
        # No command specified, run the TUI app
        return run_app()


def run_app() -> int:
    """Run the TUI application."""
    from podplayer.app import PodplayerApp

    app = PodplayerApp()
    app.run()
    return 0


async def cmd_reset_history(data_path: Path | None = None) -> int:
    """Clear the listening progress of every episode.

    Args:
        data_path: Data directory; defaults to the standard location.

    Returns:
        Exit code (0 for success).
    """
    from podplayer.config import get_data_path
    from podplayer.database import get_database
    from podplayer.session import ProgressStore

    db_path = (data_path or get_data_path()) / "podplayer.db"
    if not db_path.exists():
        print("No listening history to reset.")
        return 0

    async with get_database(db_path) as database:
        progress = ProgressStore(database)
        count = len(await progress.all())
        await progress.reset_all()

    print(f"Reset listening progress of {count} episodes.")
    return 0


async def cmd_now_playing(data_path: Path | None = None) -> int:
    """Print the persisted session snapshot.

    Args:
        data_path: Data directory; defaults to the standard location.

    Returns:
        Exit code (0 when a session is persisted, 1 otherwise).
    """
    from podplayer.config import get_data_path
    from podplayer.database import get_database
    from podplayer.session import ProgressStore, SnapshotStore
    from podplayer.session.queue import index_of
    from podplayer.widgets.player_bar import PlayerBar

    db_path = (data_path or get_data_path()) / "podplayer.db"
    if not db_path.exists():
        print("Nothing playing.", file=sys.stderr)
        return 1

    async with get_database(db_path) as database:
        snapshot = await SnapshotStore(database).load()
        if snapshot is None:
            print("Nothing playing.", file=sys.stderr)
            return 1
        track = snapshot.current_track
        record = await ProgressStore(database).get(track.id)

    print(track.title or track.id)
    print(f"  {track.url}")
    if record is not None:
        elapsed = PlayerBar.format_time(record.time)
        total = PlayerBar.format_time(record.duration)
        print(f"  {elapsed} / {total}")
    position = index_of(snapshot.queue, track.id)
    if position is not None:
        print(f"  Episode {position + 1} of {len(snapshot.queue)} in queue")
    return 0


if __name__ == "__main__":
    sys.exit(main())
