"""Application storage ports."""
from gittrends_notifications.application.storage.ports import PreferenceValue, Preferences, SecureStorage

__all__ = ["PreferenceValue", "Preferences", "SecureStorage"]
