"""Repository record handed to in-app navigation."""
from __future__ import annotations

import dataclasses
import enum
from datetime import datetime


class RepositoryPermission(str, enum.Enum):
    """Viewer permission on a GitHub repository."""

    ADMIN = "ADMIN"
    MAINTAIN = "MAINTAIN"
    WRITE = "WRITE"
    TRIAGE = "TRIAGE"
    READ = "READ"
    UNKNOWN = "UNKNOWN"


@dataclasses.dataclass(frozen=True)
class Repository:
    """A tracked GitHub repository.

    Only ``name`` and ``owner_login`` are needed to load a repository's
    trend charts; every other field defaults to an unknown / empty value.
    """

    name: str
    owner_login: str
    description: str = ""
    fork_count: int = 0
    owner_avatar_url: str = ""
    issues_count: int = 0
    watchers_count: int = 0
    star_count: int = 0
    url: str = ""
    is_fork: bool = False
    data_downloaded_at: datetime | None = None
    permission: RepositoryPermission = RepositoryPermission.UNKNOWN
    is_favorite: bool = False

    @classmethod
    def minimal(cls, name: str, owner_login: str) -> "Repository":
        return cls(name=name, owner_login=owner_login)


__all__ = ["Repository", "RepositoryPermission"]
