"""Application lifecycle events."""
from gittrends_notifications.application.lifecycle.app import AppLifecycle

__all__ = ["AppLifecycle"]
