"""Playback session: bus, manager and its durable stores."""

from podplayer.session.bus import PLAY_AUDIO, SessionBus
from podplayer.session.manager import PlaybackSession, SessionStatus
from podplayer.session.progress import ProgressStore
from podplayer.session.snapshot import SnapshotStore

__all__ = [
    "PLAY_AUDIO",
    "PlaybackSession",
    "ProgressStore",
    "SessionBus",
    "SessionStatus",
    "SnapshotStore",
]
