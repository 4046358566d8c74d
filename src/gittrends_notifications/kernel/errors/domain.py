"""Domain errors — contract and invariant violations."""

from __future__ import annotations

from typing import Any

from gittrends_notifications.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A collaborator returned something its contract rules out."""

    default_code = "invariant_violation"


class PromptResultError(InvariantViolationError):
    """An interactive confirm/cancel prompt produced no answer."""

    default_code = "prompt_result_missing"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class BadgeCountOutOfRangeError(ValidationError, ValueError):
    """A tapped notification carried a badge count below one."""

    default_code = "badge_count_out_of_range"

    def __init__(self, badge_count: int, **kwargs: Any) -> None:
        super().__init__(
            f"{badge_count} must be greater than zero",
            errors=[{"field": "badge_count", "value": badge_count}],
            **kwargs,
        )
        self.badge_count = badge_count


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class RegistrationInProgressError(ConflictError):
    """A registration is already waiting on the settings round-trip."""

    default_code = "registration_in_progress"

    def __init__(self, message: str = "A notification registration is already awaiting the settings UI", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "BadgeCountOutOfRangeError",
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "PromptResultError",
    "RegistrationInProgressError",
    "ValidationError",
]
