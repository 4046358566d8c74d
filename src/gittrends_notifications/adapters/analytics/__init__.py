"""Analytics adapters."""
from gittrends_notifications.adapters.analytics.structlog_reporter import StructlogAnalyticsService

__all__ = ["StructlogAnalyticsService"]
