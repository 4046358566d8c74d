"""Kernel – framework-agnostic building blocks."""

from gittrends_notifications.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    InvariantViolationError,
    SerializationError,
    StorageError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvariantViolationError",
    "SerializationError",
    "StorageError",
    "TimeoutError",
    "ValidationError",
]
