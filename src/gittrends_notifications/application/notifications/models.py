"""Application notifications – local notification models and access states."""
from __future__ import annotations

import dataclasses
import enum
from datetime import datetime

__all__ = [
    "AccessState",
    "Channel",
    "ChannelImportance",
    "Notification",
    "RegistrationOutcome",
]


class AccessState(str, enum.Enum):
    """Result of asking the OS for notification permission."""

    AVAILABLE = "Available"
    RESTRICTED = "Restricted"
    DENIED = "Denied"
    DISABLED = "Disabled"
    NOT_SETUP = "NotSetup"
    NOT_SUPPORTED = "NotSupported"

    @property
    def is_granted(self) -> bool:
        return self in (AccessState.AVAILABLE, AccessState.RESTRICTED)


class ChannelImportance(str, enum.Enum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    CRITICAL = "Critical"


@dataclasses.dataclass(frozen=True)
class Channel:
    """An OS notification channel."""

    identifier: str
    description: str = ""
    importance: ChannelImportance = ChannelImportance.NORMAL


@dataclasses.dataclass(frozen=True)
class Notification:
    """A local notification handed to the permission gateway for display."""

    id: int
    title: str
    message: str
    schedule_date: datetime | None = None
    badge_count: int = 0


@dataclasses.dataclass(frozen=True)
class RegistrationOutcome:
    """Payload of the ``RegistrationCompleted`` event."""

    access_state: AccessState | None
    error_message: str = ""

    @property
    def is_successful(self) -> bool:
        return self.access_state is not None and self.access_state.is_granted
