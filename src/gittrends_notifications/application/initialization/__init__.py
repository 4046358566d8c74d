"""Application initialization."""
from gittrends_notifications.application.initialization.service import AppInitializationService

__all__ = ["AppInitializationService"]
