"""AppResumeListener – completes a pending settings round-trip on resume."""
from __future__ import annotations

from gittrends_notifications.application.lifecycle import AppLifecycle
from gittrends_notifications.application.notifications.ports import NotificationManager
from gittrends_notifications.application.notifications.settings_request import PendingSettingsRequest
from gittrends_notifications.observability.logging import get_logger

__all__ = ["AppResumeListener"]

_log = get_logger(__name__)


class AppResumeListener:
    """Re-queries notification permission when the app comes back.

    Only acts while a :class:`PendingSettingsRequest` is open; the re-queried
    access state resolves the suspended ``register`` call.  A gateway failure
    is forwarded to the waiter rather than raised into the lifecycle event.
    """

    def __init__(
        self,
        pending_request: PendingSettingsRequest,
        notification_manager: NotificationManager,
    ) -> None:
        self._pending_request = pending_request
        self._notification_manager = notification_manager

    def attach(self, lifecycle: AppLifecycle) -> None:
        lifecycle.resumed.subscribe(self.handle_app_resumed)

    def detach(self, lifecycle: AppLifecycle) -> None:
        lifecycle.resumed.unsubscribe(self.handle_app_resumed)

    async def handle_app_resumed(self, _: None = None) -> None:
        if not self._pending_request.is_pending:
            return
        try:
            access_state = await self._notification_manager.request_access()
        except Exception as exc:
            _log.warning("settings_request.requery_failed", error=str(exc))
            self._pending_request.fail(exc)
            return
        _log.info("settings_request.fulfilled", access_state=access_state.value)
        self._pending_request.fulfill(access_state)
