"""AppInitializationService – startup sequencing for the notification layer."""
from __future__ import annotations

import asyncio
from typing import Any

from gittrends_notifications.application.notifications.ports import AnalyticsService
from gittrends_notifications.application.notifications.service import NotificationService
from gittrends_notifications.config import NotificationSettings
from gittrends_notifications.kernel.events import EventSource
from gittrends_notifications.observability.logging import get_logger

__all__ = ["AppInitializationService"]

_log = get_logger(__name__)


class AppInitializationService:
    """Runs startup work and publishes whether it succeeded.

    When ``defer_notification_initialization`` is set, notification
    initialization is started but not awaited; its failure is reported to
    analytics instead of failing startup.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        analytics: AnalyticsService,
        settings: NotificationSettings | None = None,
    ) -> None:
        self._notification_service = notification_service
        self._analytics = analytics
        self._settings = settings or NotificationSettings()
        self._deferred: set[asyncio.Task[Any]] = set()
        self.is_initialization_complete = False
        self.initialization_completed: EventSource[bool] = EventSource("InitializationCompleted")

    async def initialize_app(self) -> bool:
        is_successful = False
        try:
            if self._settings.defer_notification_initialization:
                task = asyncio.create_task(
                    self._notification_service.initialize(), name="notification-initialize"
                )
                self._deferred.add(task)
                task.add_done_callback(self._on_deferred_done)
            else:
                await self._notification_service.initialize()
            is_successful = True
        except Exception as exc:
            _log.error("app.initialization_failed", error=str(exc))
            self._analytics.report(exc)
        finally:
            self.is_initialization_complete = is_successful
            await self.initialization_completed.publish(is_successful)
        return is_successful

    def _on_deferred_done(self, task: asyncio.Task[Any]) -> None:
        self._deferred.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._analytics.report(exc)

    async def wait_for_deferred(self) -> None:
        if self._deferred:
            await asyncio.gather(*self._deferred, return_exceptions=True)
