"""Config settings – NotificationSettings.

Per-target knobs that used to be compile-time or platform switches in the
mobile app: the notification-id quirk, throttle mode and channel support.
"""
from __future__ import annotations

import dataclasses
import enum
from datetime import timedelta

from gittrends_notifications.config.settings.base import Settings
from gittrends_notifications.config.validation import InvalidSettingValueError


class ThrottleMode(str, enum.Enum):
    """How repeated trending notifications for one repository are handled."""

    THROTTLED = "throttled"
    ALWAYS_NOTIFY = "always_notify"


@dataclasses.dataclass
class NotificationSettings(Settings):
    """Settings consumed by :class:`NotificationService` and its adapters.

    ``requires_non_zero_id``
        Some platforms reject (or crash on) a notification whose id is ``0``.
    ``throttle_mode`` / ``throttle_window_days``
        Suppress re-notifying about the same repository inside the window.
    ``supports_channels``
        Whether the target OS has notification channels at all.
    """

    _prefix = "GITTRENDS"

    requires_non_zero_id: bool = False
    throttle_mode: ThrottleMode = ThrottleMode.THROTTLED
    throttle_window_days: int = 3
    supports_channels: bool = True
    defer_notification_initialization: bool = False
    hub_api_base_url: str = ""
    hub_function_key: str = ""
    hub_timeout_seconds: float = 10.0

    def _validate(self) -> None:
        if not isinstance(self.throttle_mode, ThrottleMode):
            try:
                self.throttle_mode = ThrottleMode(str(self.throttle_mode).lower())
            except ValueError as exc:
                raise InvalidSettingValueError(
                    "throttle_mode",
                    self.throttle_mode,
                    f"expected one of {[m.value for m in ThrottleMode]}",
                ) from exc
        if self.throttle_window_days < 0:
            raise InvalidSettingValueError(
                "throttle_window_days", self.throttle_window_days, "must not be negative"
            )
        if self.hub_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "hub_timeout_seconds", self.hub_timeout_seconds, "must be positive"
            )

    @property
    def throttle_window(self) -> timedelta:
        return timedelta(days=self.throttle_window_days)

    @property
    def notification_id(self) -> int:
        return 1 if self.requires_non_zero_id else 0


__all__ = ["NotificationSettings", "ThrottleMode"]
