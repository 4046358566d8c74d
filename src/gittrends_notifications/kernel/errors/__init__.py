"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   │   └── PromptResultError
    │   ├── ValidationError
    │   │   └── BadgeCountOutOfRangeError
    │   └── ConflictError
    │       └── RegistrationInProgressError
    ├── ApplicationError         (application.py)
    │   └── TimeoutError
    └── InfrastructureError      (infrastructure.py)
        ├── SerializationError
        ├── StorageError
        └── ExternalServiceError
"""

from gittrends_notifications.kernel.errors.application import ApplicationError, TimeoutError
from gittrends_notifications.kernel.errors.base import BaseError
from gittrends_notifications.kernel.errors.domain import (
    BadgeCountOutOfRangeError,
    ConflictError,
    DomainError,
    InvariantViolationError,
    PromptResultError,
    RegistrationInProgressError,
    ValidationError,
)
from gittrends_notifications.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
    StorageError,
)

__all__ = [
    "ApplicationError",
    "BadgeCountOutOfRangeError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvariantViolationError",
    "PromptResultError",
    "RegistrationInProgressError",
    "SerializationError",
    "StorageError",
    "TimeoutError",
    "ValidationError",
]
