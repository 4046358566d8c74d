"""HTTP adapters."""
from gittrends_notifications.adapters.http.hub_client import HttpHubInformationService

__all__ = ["HttpHubInformationService"]
