"""Storage adapter – FernetSecureStorage.

A file-backed :class:`~gittrends_notifications.application.storage.SecureStorage`:
one JSON object mapping each key to a Fernet token.  File IO runs in a worker
thread so the event loop is never blocked.
"""
from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken, MultiFernet

from gittrends_notifications.kernel.errors import StorageError

__all__ = ["FernetSecureStorage"]


class FernetSecureStorage:
    """Encrypted key-value file; supports key rotation via a key list.

    The first key encrypts; every key is tried for decryption.
    """

    def __init__(self, path: str | os.PathLike[str], keys: list[bytes | str]) -> None:
        if not keys:
            raise ValueError("At least one Fernet key is required")
        self._path = Path(path)
        self._fernet = MultiFernet([Fernet(k if isinstance(k, bytes) else k.encode()) for k in keys])
        self._lock = asyncio.Lock()

    @classmethod
    def generate_key(cls) -> bytes:
        return Fernet.generate_key()

    async def get(self, key: str) -> str | None:
        entries = await asyncio.to_thread(self._read_entries, key)
        token = entries.get(key)
        if token is None:
            return None
        try:
            return self._fernet.decrypt(token.encode()).decode()
        except InvalidToken as exc:
            raise StorageError(key, f"Stored value for '{key}' could not be decrypted", cause=exc) from exc

    async def set(self, key: str, value: str) -> None:
        token = self._fernet.encrypt(value.encode()).decode()
        async with self._lock:
            await asyncio.to_thread(self._write_entry, key, token)

    async def remove(self, key: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write_entry, key, None)

    def _read_entries(self, key: str) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(key, f"Secure storage file '{self._path}' is unreadable", cause=exc) from exc
        if not isinstance(data, dict):
            raise StorageError(key, f"Secure storage file '{self._path}' is corrupt")
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_entry(self, key: str, token: str | None) -> None:
        entries = self._read_entries(key)
        if token is None:
            entries.pop(key, None)
        else:
            entries[key] = token
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(entries, fh)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            raise StorageError(key, f"Could not write secure storage file '{self._path}'", cause=exc) from exc
