"""Unit tests – testing fakes honour the notification ports."""
from __future__ import annotations

import asyncio

import pytest

from gittrends_notifications.application.notifications import (
    AccessState,
    AnalyticsService,
    DeepLinkPresenter,
    HubInformationService,
    NotificationManager,
    Preferences,
    SecureStorage,
)
from gittrends_notifications.kernel.errors import StorageError
from gittrends_notifications.testing.fakes import (
    FakeDeepLinkPresenter,
    FakeHubInformationService,
    FakeNotificationManager,
    InMemoryPreferences,
    InMemorySecureStorage,
    RecordingAnalyticsService,
)


@pytest.mark.parametrize(
    "fake,port",
    [
        (FakeNotificationManager(), NotificationManager),
        (FakeDeepLinkPresenter(), DeepLinkPresenter),
        (FakeHubInformationService(), HubInformationService),
        (RecordingAnalyticsService(), AnalyticsService),
        (InMemoryPreferences(), Preferences),
        (InMemorySecureStorage(), SecureStorage),
    ],
)
def test_fake_satisfies_port(fake, port):
    assert isinstance(fake, port)


class TestFakeNotificationManager:
    def test_script_is_consumed_then_last_value_repeats(self):
        async def run():
            manager = FakeNotificationManager((AccessState.NOT_SETUP, AccessState.AVAILABLE))
            results = [await manager.request_access() for _ in range(3)]
            assert results == [AccessState.NOT_SETUP, AccessState.AVAILABLE, AccessState.AVAILABLE]
            assert manager.access_requests == 3
        asyncio.run(run())


class TestInMemorySecureStorage:
    def test_failure_switches(self):
        async def run():
            store = InMemorySecureStorage()
            store.fail_reads = StorageError("k")
            with pytest.raises(StorageError):
                await store.get("k")
        asyncio.run(run())


class TestFakeDeepLinkPresenter:
    def test_informational_alert_has_no_answer(self):
        async def run():
            presenter = FakeDeepLinkPresenter(answer=True)
            assert await presenter.display_alert("t", "m", "OK") is None
            assert await presenter.display_alert("t", "m", "Yes", "No") is True
            assert [a.decline for a in presenter.alerts] == [None, "No"]
        asyncio.run(run())
