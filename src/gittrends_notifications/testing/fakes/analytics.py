"""Testing fakes – RecordingAnalyticsService."""
from __future__ import annotations

from typing import Any, Mapping


class RecordingAnalyticsService:
    """Captures reported exceptions and tracked events."""

    def __init__(self) -> None:
        self.reported: list[BaseException] = []
        self.events: list[tuple[str, dict[str, str]]] = []

    def report(self, exc: BaseException, properties: Mapping[str, Any] | None = None) -> None:
        self.reported.append(exc)

    def track(self, event_name: str, properties: Mapping[str, str] | None = None) -> None:
        self.events.append((event_name, dict(properties or {})))

    @property
    def event_names(self) -> list[str]:
        return [name for name, _ in self.events]


__all__ = ["RecordingAnalyticsService"]
