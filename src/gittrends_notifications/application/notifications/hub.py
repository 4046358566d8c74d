"""Notification hub registration info and its cached JSON form."""
from __future__ import annotations

import dataclasses
import json
from typing import Any, ClassVar

from gittrends_notifications.kernel.errors import SerializationError

__all__ = ["NotificationHubInformation", "deserialize_hub_information"]


@dataclasses.dataclass(frozen=True)
class NotificationHubInformation:
    """Token identifying this install to the push-notification relay.

    ``EMPTY`` is a distinguished sentinel; test for it with :meth:`is_empty`
    rather than comparing against ``None``.
    """

    registration_id: str
    token: str
    is_valid: bool = True

    EMPTY: ClassVar["NotificationHubInformation"]

    def is_empty(self) -> bool:
        return not self.registration_id and not self.token

    def to_dict(self) -> dict[str, Any]:
        return {
            "registrationId": self.registration_id,
            "token": self.token,
            "isValid": self.is_valid,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "NotificationHubInformation":
        """Build from a decoded JSON object.

        Raises:
            SerializationError: *data* is not an object of the expected shape.
        """
        if not isinstance(data, dict):
            raise SerializationError(
                f"Expected a JSON object, got {type(data).__name__}",
                payload_type=cls.__name__,
            )
        registration_id = data.get("registrationId")
        token = data.get("token")
        is_valid = data.get("isValid", True)
        if not isinstance(registration_id, str) or not isinstance(token, str):
            raise SerializationError(
                "registrationId and token must be strings", payload_type=cls.__name__
            )
        if not isinstance(is_valid, bool):
            raise SerializationError("isValid must be a boolean", payload_type=cls.__name__)
        return cls(registration_id=registration_id, token=token, is_valid=is_valid)

    @classmethod
    def from_json(cls, text: str) -> "NotificationHubInformation":
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc), payload_type=cls.__name__, cause=exc) from exc
        return cls.from_dict(data)


NotificationHubInformation.EMPTY = NotificationHubInformation(registration_id="", token="", is_valid=False)


def deserialize_hub_information(text: str | None) -> NotificationHubInformation:
    """Decode a cached value, mapping ``None`` and malformed text to ``EMPTY``."""
    if text is None:
        return NotificationHubInformation.EMPTY
    try:
        return NotificationHubInformation.from_json(text)
    except SerializationError:
        return NotificationHubInformation.EMPTY
