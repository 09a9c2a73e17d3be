"""Publish/subscribe channel for play requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podplayer.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from podplayer.models import PlayRequest

    PlayHandler = Callable[[PlayRequest], Awaitable[None]]

_log = get_logger("bus")

PLAY_AUDIO = "play-audio"


class SessionBus:
    """Carries ``play-audio`` requests from views to the playback session.

    Views publish without holding a reference to the session. Delivery is
    in-order to the handlers subscribed at publish time; a request published
    while nobody listens is dropped.
    """

    def __init__(self) -> None:
        """Initialize the bus with no subscribers."""
        self._handlers: list[PlayHandler] = []

    @property
    def subscriber_count(self) -> int:
        """Number of subscribed handlers."""
        return len(self._handlers)

    def subscribe(self, handler: PlayHandler) -> Callable[[], None]:
        """Register a handler for play requests.

        Args:
            handler: Coroutine function called with each request.

        Returns:
            A callable that removes the handler. Calling it twice is harmless.
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    async def publish(self, request: PlayRequest) -> None:
        """Deliver a play request to every current subscriber.

        Args:
            request: The track and queue to play.
        """
        handlers = list(self._handlers)
        if not handlers:
            _log.debug("Dropped %s for %s: no subscribers", PLAY_AUDIO, request.id)
            return

        for handler in handlers:
            try:
                await handler(request)
            except Exception:
                _log.exception("Error handling %s for %s", PLAY_AUDIO, request.id)
