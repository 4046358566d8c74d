"""AppLifecycle – foreground/background notifications from the host app."""
from __future__ import annotations

from gittrends_notifications.kernel.events import EventSource
from gittrends_notifications.observability.logging import get_logger

__all__ = ["AppLifecycle"]

_log = get_logger(__name__)


class AppLifecycle:
    """Owns the application-scoped ``resumed`` event.

    The host calls :meth:`notify_resumed` when the app regains the
    foreground.
    """

    def __init__(self) -> None:
        self.resumed: EventSource[None] = EventSource("Resumed")

    async def notify_resumed(self) -> None:
        _log.debug("app.resumed", subscribers=self.resumed.subscriber_count)
        await self.resumed.publish(None)
