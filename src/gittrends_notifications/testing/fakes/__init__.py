"""Testing fakes – in-memory doubles for notification ports."""
from gittrends_notifications.adapters.storage.preferences import InMemoryPreferences
from gittrends_notifications.kernel.time import FrozenClock
from gittrends_notifications.testing.fakes.analytics import RecordingAnalyticsService
from gittrends_notifications.testing.fakes.clock import FakeClock
from gittrends_notifications.testing.fakes.hub import FakeHubInformationService
from gittrends_notifications.testing.fakes.notification_manager import FakeNotificationManager
from gittrends_notifications.testing.fakes.presenter import DisplayedAlert, FakeDeepLinkPresenter
from gittrends_notifications.testing.fakes.secure_storage import InMemorySecureStorage

__all__ = [
    "DisplayedAlert",
    "FakeClock",
    "FakeDeepLinkPresenter",
    "FakeHubInformationService",
    "FakeNotificationManager",
    "FrozenClock",
    "InMemoryPreferences",
    "InMemorySecureStorage",
    "RecordingAnalyticsService",
]
