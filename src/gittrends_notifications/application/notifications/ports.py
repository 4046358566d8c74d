"""Application notifications – collaborator ports.

Every collaborator of :class:`NotificationService` is a structural
``Protocol``; in-memory fakes live in
:mod:`gittrends_notifications.testing.fakes`.
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from gittrends_notifications.application.notifications.hub import NotificationHubInformation
from gittrends_notifications.application.notifications.models import AccessState, Channel, Notification
from gittrends_notifications.application.repositories import Repository
from gittrends_notifications.application.storage import PreferenceValue, Preferences, SecureStorage

__all__ = [
    "AnalyticsService",
    "DeepLinkPresenter",
    "HubInformationService",
    "NotificationManager",
    "PreferenceValue",
    "Preferences",
    "SecureStorage",
]


@runtime_checkable
class NotificationManager(Protocol):
    """Port: OS notification permission and delivery."""

    async def request_access(self) -> AccessState: ...

    def get_channels(self) -> list[Channel]: ...

    def add_channel(self, channel: Channel) -> None: ...

    async def send(self, notification: Notification) -> None: ...

    async def try_set_badge(self, count: int) -> bool: ...


@runtime_checkable
class DeepLinkPresenter(Protocol):
    """Port: modal prompts and in-app navigation.

    ``is_interactive`` is ``False`` when no UI is attached (headless hosts,
    test harnesses); prompts are then treated as accepted.
    """

    @property
    def is_interactive(self) -> bool: ...

    async def display_alert(
        self,
        title: str,
        message: str,
        accept: str,
        decline: str | None = None,
    ) -> bool | None: ...

    async def show_settings_ui(self) -> None: ...

    async def navigate_to_trends_page(self, repository: Repository) -> None: ...


@runtime_checkable
class HubInformationService(Protocol):
    """Port: remote service issuing notification hub registration info."""

    async def get_notification_hub_information(self) -> NotificationHubInformation: ...


@runtime_checkable
class AnalyticsService(Protocol):
    """Port: fire-and-forget error reporting and event tracking."""

    def report(self, exc: BaseException, properties: Mapping[str, Any] | None = None) -> None: ...

    def track(self, event_name: str, properties: Mapping[str, str] | None = None) -> None: ...
