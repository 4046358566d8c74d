"""Application notifications – coordinator, ports, models and resume handling."""
from gittrends_notifications.application.notifications.hub import (
    NotificationHubInformation,
    deserialize_hub_information,
)
from gittrends_notifications.application.notifications.models import (
    AccessState,
    Channel,
    ChannelImportance,
    Notification,
    RegistrationOutcome,
)
from gittrends_notifications.application.notifications.ports import (
    AnalyticsService,
    DeepLinkPresenter,
    HubInformationService,
    NotificationManager,
    Preferences,
    SecureStorage,
)
from gittrends_notifications.application.notifications.resume import AppResumeListener
from gittrends_notifications.application.notifications.service import NotificationService
from gittrends_notifications.application.notifications.settings_request import PendingSettingsRequest
from gittrends_notifications.application.notifications.throttle import TrendingNotificationThrottle

__all__ = [
    "AccessState",
    "AnalyticsService",
    "AppResumeListener",
    "Channel",
    "ChannelImportance",
    "DeepLinkPresenter",
    "HubInformationService",
    "Notification",
    "NotificationHubInformation",
    "NotificationManager",
    "NotificationService",
    "PendingSettingsRequest",
    "Preferences",
    "RegistrationOutcome",
    "SecureStorage",
    "TrendingNotificationThrottle",
    "deserialize_hub_information",
]
