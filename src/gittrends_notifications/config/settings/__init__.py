"""Config settings."""
from gittrends_notifications.config.settings.base import Settings
from gittrends_notifications.config.settings.loaders import EnvSettingsLoader, SettingsLoader, load_settings
from gittrends_notifications.config.settings.notifications import NotificationSettings, ThrottleMode

__all__ = [
    "EnvSettingsLoader",
    "NotificationSettings",
    "Settings",
    "SettingsLoader",
    "ThrottleMode",
    "load_settings",
]
