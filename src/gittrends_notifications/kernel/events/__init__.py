"""Kernel events – weak-referenced, instance-owned event sources."""
from gittrends_notifications.kernel.events.source import EventSource, Handler

__all__ = ["EventSource", "Handler"]
