"""Config – settings dataclasses, environment loading, validation errors."""
from gittrends_notifications.config.settings import (
    EnvSettingsLoader,
    NotificationSettings,
    Settings,
    SettingsLoader,
    ThrottleMode,
    load_settings,
)
from gittrends_notifications.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NotificationSettings",
    "Settings",
    "SettingsLoader",
    "ThrottleMode",
    "load_settings",
]
