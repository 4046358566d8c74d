"""Application repositories – repository record."""
from gittrends_notifications.application.repositories.models import Repository, RepositoryPermission

__all__ = ["Repository", "RepositoryPermission"]
