"""Single-slot continuation for the OS-settings round-trip."""
from __future__ import annotations

import asyncio

from gittrends_notifications.application.notifications.models import AccessState
from gittrends_notifications.kernel.errors import RegistrationInProgressError

__all__ = ["PendingSettingsRequest"]


class PendingSettingsRequest:
    """Holds at most one future awaiting the app's return from OS settings.

    The registration flow :meth:`open`s the slot before showing the settings
    UI and awaits the returned future; the resume listener :meth:`fulfill`s
    it.  Opening an occupied slot raises instead of replacing the waiter.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[AccessState] | None = None

    @property
    def is_pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def open(self) -> asyncio.Future[AccessState]:
        if self.is_pending:
            raise RegistrationInProgressError()
        self._future = asyncio.get_running_loop().create_future()
        return self._future

    def fulfill(self, access_state: AccessState) -> bool:
        """Resolve the waiter; returns ``False`` when nothing is pending."""
        if not self.is_pending:
            return False
        assert self._future is not None
        self._future.set_result(access_state)
        return True

    def fail(self, exc: BaseException) -> bool:
        if not self.is_pending:
            return False
        assert self._future is not None
        self._future.set_exception(exc)
        return True

    def clear(self, owner: asyncio.Future[AccessState] | None = None) -> None:
        """Empty the slot; with *owner*, only if it still holds that future."""
        if owner is not None and self._future is not owner:
            return
        if self._future is not None and not self._future.done():
            self._future.cancel()
        self._future = None
