"""Observability – structured logging helpers."""
from gittrends_notifications.observability.logging.factory import JsonLoggerFactory
from gittrends_notifications.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
