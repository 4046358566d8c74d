"""Unit tests – kernel error hierarchy."""
from __future__ import annotations

import json

import pytest

from gittrends_notifications.kernel.errors import (
    ApplicationError,
    BadgeCountOutOfRangeError,
    BaseError,
    ConflictError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    InvariantViolationError,
    PromptResultError,
    RegistrationInProgressError,
    SerializationError,
    StorageError,
    TimeoutError,
    ValidationError,
)


class TestBaseError:
    def test_str_is_message(self):
        assert str(BaseError("plain message")) == "plain message"

    def test_default_code(self):
        assert BaseError("x").code == "base_error"

    def test_custom_code_and_detail(self):
        err = BaseError("x", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_cause_is_chained(self):
        cause = ValueError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_to_json_is_single_line(self):
        payload = json.loads(BaseError("x", detail={"when": object()}).to_json())
        assert payload["message"] == "x"

    def test_repr(self):
        assert repr(DomainError("boom")) == "DomainError(code='domain_error', message='boom')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type,parent",
        [
            (InvariantViolationError, DomainError),
            (PromptResultError, InvariantViolationError),
            (ValidationError, DomainError),
            (BadgeCountOutOfRangeError, ValidationError),
            (RegistrationInProgressError, ConflictError),
            (TimeoutError, ApplicationError),
            (SerializationError, InfrastructureError),
            (StorageError, InfrastructureError),
            (ExternalServiceError, InfrastructureError),
        ],
    )
    def test_subclassing(self, error_type, parent):
        assert issubclass(error_type, parent)
        assert issubclass(error_type, BaseError)


class TestBadgeCountOutOfRangeError:
    def test_is_value_error(self):
        err = BadgeCountOutOfRangeError(-2)
        assert isinstance(err, ValueError)
        assert err.badge_count == -2
        assert str(err) == "-2 must be greater than zero"
        assert err.to_dict()["errors"] == [{"field": "badge_count", "value": -2}]


class TestInfrastructureErrors:
    def test_storage_error_default_message(self):
        err = StorageError("hub")
        assert err.key == "hub"
        assert "hub" in err.message

    def test_external_service_error(self):
        err = ExternalServiceError("notification-hub", status_code=503)
        assert err.status_code == 503
        assert err.code == "external_service_error"

    def test_serialization_error_payload_type(self):
        assert SerializationError("bad", payload_type="Hub").payload_type == "Hub"
