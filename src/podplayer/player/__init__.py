"""Player implementations for podplayer."""

from podplayer.player.base import (
    BasePlayer,
    NullPlayer,
    Player,
    PlayerState,
    TransportError,
)

__all__ = ["BasePlayer", "NullPlayer", "Player", "PlayerState", "TransportError"]
