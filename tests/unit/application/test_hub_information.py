"""Unit tests – NotificationHubInformation cache format."""
from __future__ import annotations

import json

import pytest

from gittrends_notifications.application.notifications import (
    NotificationHubInformation,
    deserialize_hub_information,
)
from gittrends_notifications.kernel.errors import SerializationError


class TestNotificationHubInformation:
    def test_round_trip(self):
        info = NotificationHubInformation(registration_id="reg-42", token="sig=abc", is_valid=True)
        assert NotificationHubInformation.from_json(info.to_json()) == info

    def test_json_shape(self):
        info = NotificationHubInformation(registration_id="reg", token="tok", is_valid=False)
        assert json.loads(info.to_json()) == {"registrationId": "reg", "token": "tok", "isValid": False}

    def test_empty_sentinel(self):
        assert NotificationHubInformation.EMPTY.is_empty()
        assert not NotificationHubInformation(registration_id="r", token="").is_empty()

    def test_empty_round_trips_to_empty(self):
        restored = deserialize_hub_information(NotificationHubInformation.EMPTY.to_json())
        assert restored.is_empty()

    def test_is_valid_defaults_to_true_when_absent(self):
        info = NotificationHubInformation.from_json('{"registrationId": "r", "token": "t"}')
        assert info.is_valid is True

    def test_from_json_raises_serialization_error(self):
        with pytest.raises(SerializationError):
            NotificationHubInformation.from_json("not json")


class TestDeserializeHubInformation:
    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "{",
            "null",
            "[]",
            '"a string"',
            '{"registrationId": 1, "token": "t"}',
            '{"registrationId": "r"}',
            '{"registrationId": "r", "token": "t", "isValid": "yes"}',
        ],
    )
    def test_malformed_values_become_empty(self, text):
        assert deserialize_hub_information(text) is NotificationHubInformation.EMPTY

    def test_valid_value_is_decoded(self):
        text = '{"registrationId": "r", "token": "t", "isValid": true}'
        assert deserialize_hub_information(text) == NotificationHubInformation("r", "t", True)
