"""Per-repository throttle for trending notifications."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Iterable

from gittrends_notifications.application.repositories import Repository
from gittrends_notifications.application.storage import Preferences

__all__ = ["TrendingNotificationThrottle"]

_NEVER_NOTIFIED = datetime.min.replace(tzinfo=UTC)


class TrendingNotificationThrottle:
    """Last-notified timestamps keyed by repository name."""

    KEY_PREFIX = "TrendingNotificationDate."

    def __init__(self, preferences: Preferences, window: timedelta) -> None:
        self._preferences = preferences
        self._window = window

    @property
    def window(self) -> timedelta:
        return self._window

    def last_notified(self, repository_name: str) -> datetime:
        value = self._preferences.get(self.KEY_PREFIX + repository_name, _NEVER_NOTIFIED)
        if not isinstance(value, datetime):
            return _NEVER_NOTIFIED
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value

    def is_due(self, repository: Repository, now: datetime) -> bool:
        last = self.last_notified(repository.name)
        if last == _NEVER_NOTIFIED:
            return True
        return last + self._window <= now

    def filter_due(self, repositories: Iterable[Repository], now: datetime) -> list[Repository]:
        return [repository for repository in repositories if self.is_due(repository, now)]

    def stamp(self, repositories: Iterable[Repository], now: datetime) -> None:
        for repository in repositories:
            self._preferences.set(self.KEY_PREFIX + repository.name, now)
