"""Storage adapters – secure token store and preferences."""
from gittrends_notifications.adapters.storage.preferences import InMemoryPreferences, JsonFilePreferences
from gittrends_notifications.adapters.storage.secure_storage import FernetSecureStorage

__all__ = ["FernetSecureStorage", "InMemoryPreferences", "JsonFilePreferences"]
