"""Testing fakes – FakeHubInformationService."""
from __future__ import annotations

import asyncio

from gittrends_notifications.application.notifications.hub import NotificationHubInformation


class FakeHubInformationService:
    """Returns ``hub_information`` or raises ``error`` when it is set.

    With ``gate`` set, each call waits for the event first, so a test can
    hold a fetch open and observe who is blocked on it.
    """

    def __init__(self, hub_information: NotificationHubInformation | None = None) -> None:
        self.hub_information = hub_information or NotificationHubInformation(
            registration_id="registration-1", token="token-1"
        )
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.calls = 0

    async def get_notification_hub_information(self) -> NotificationHubInformation:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.hub_information


__all__ = ["FakeHubInformationService"]
