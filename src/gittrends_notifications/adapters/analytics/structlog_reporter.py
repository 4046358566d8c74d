"""Analytics adapter – StructlogAnalyticsService."""
from __future__ import annotations

from typing import Any, Mapping

from gittrends_notifications.kernel.errors import BaseError
from gittrends_notifications.observability.logging import get_logger

__all__ = ["StructlogAnalyticsService"]


class StructlogAnalyticsService:
    """Reports exceptions and tracks events as structured log lines."""

    def __init__(self, logger_name: str = "gittrends.analytics") -> None:
        self._log = get_logger(logger_name)

    def report(self, exc: BaseException, properties: Mapping[str, Any] | None = None) -> None:
        fields: dict[str, Any] = dict(properties or {})
        if isinstance(exc, BaseError):
            fields["error"] = exc.to_dict()
        else:
            fields["error"] = {"type": type(exc).__name__, "message": str(exc)}
        self._log.error("analytics.exception", exc_info=exc, **fields)

    def track(self, event_name: str, properties: Mapping[str, str] | None = None) -> None:
        self._log.info("analytics.event", event_name=event_name, properties=dict(properties or {}))
