"""Storage adapters – InMemoryPreferences and JsonFilePreferences."""
from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from gittrends_notifications.application.storage import PreferenceValue
from gittrends_notifications.kernel.errors import StorageError

__all__ = ["InMemoryPreferences", "JsonFilePreferences"]

_DATETIME_TAG = "$datetime"


class InMemoryPreferences:
    """Dict-backed :class:`Preferences`; values are kept as-is."""

    def __init__(self, initial: dict[str, PreferenceValue] | None = None) -> None:
        self._values: dict[str, PreferenceValue] = dict(initial or {})

    def get(self, key: str, default: PreferenceValue) -> PreferenceValue:
        return self._values.get(key, default)

    def set(self, key: str, value: PreferenceValue) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, PreferenceValue]:
        return dict(self._values)


class JsonFilePreferences(InMemoryPreferences):
    """Preferences persisted to a JSON file after every write.

    Datetimes are stored as ``{"$datetime": "<iso-8601>"}``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        super().__init__(self._load())

    def set(self, key: str, value: PreferenceValue) -> None:
        super().set(key, value)
        self._flush(key)

    def remove(self, key: str) -> None:
        super().remove(key)
        self._flush(key)

    def _load(self) -> dict[str, PreferenceValue]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(str(self._path), f"Preferences file '{self._path}' is unreadable", cause=exc) from exc
        if not isinstance(raw, dict):
            raise StorageError(str(self._path), f"Preferences file '{self._path}' is corrupt")
        try:
            return {key: _decode(value) for key, value in raw.items()}
        except (TypeError, ValueError) as exc:
            raise StorageError(str(self._path), f"Preferences file '{self._path}' holds a malformed datetime", cause=exc) from exc

    def _flush(self, key: str) -> None:
        payload = {k: _encode(v) for k, v in self.snapshot().items()}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            raise StorageError(key, f"Could not write preferences file '{self._path}'", cause=exc) from exc


def _encode(value: PreferenceValue) -> Any:
    if isinstance(value, datetime):
        return {_DATETIME_TAG: value.isoformat()}
    return value


def _decode(value: Any) -> PreferenceValue:
    if isinstance(value, dict) and _DATETIME_TAG in value:
        return datetime.fromisoformat(value[_DATETIME_TAG])
    return value
