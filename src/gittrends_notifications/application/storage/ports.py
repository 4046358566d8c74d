"""Storage ports – settings-style preferences and the secure key-value store."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol, Union, runtime_checkable

#: Value types a :class:`Preferences` store round-trips.
PreferenceValue = Union[bool, int, float, str, datetime]


@runtime_checkable
class Preferences(Protocol):
    """Port: small synchronous key-value store for user preferences."""

    def get(self, key: str, default: PreferenceValue) -> PreferenceValue: ...

    def set(self, key: str, value: PreferenceValue) -> None: ...

    def remove(self, key: str) -> None: ...


@runtime_checkable
class SecureStorage(Protocol):
    """Port: opaque, encrypted async key-value store.

    Both operations may raise; callers that can tolerate a missing value
    treat any failure as "absent".
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


__all__ = ["PreferenceValue", "Preferences", "SecureStorage"]
