"""Observability – structured logging."""
from gittrends_notifications.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
