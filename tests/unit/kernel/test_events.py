"""Unit tests – EventSource."""
from __future__ import annotations

import asyncio
import gc

from gittrends_notifications.kernel.events import EventSource


class _Listener:
    def __init__(self) -> None:
        self.received: list[int] = []

    def on_event(self, payload: int) -> None:
        self.received.append(payload)


class TestEventSource:
    def test_publish_reaches_sync_and_async_handlers_in_order(self):
        calls: list[str] = []

        async def async_handler(payload: int) -> None:
            await asyncio.sleep(0)
            calls.append(f"async:{payload}")

        source: EventSource[int] = EventSource("Numbers")
        source.subscribe(lambda p: calls.append(f"sync:{p}"))
        source.subscribe(async_handler)

        asyncio.run(source.publish(7))
        assert calls == ["sync:7", "async:7"]

    def test_multiple_subscribers(self):
        listeners = [_Listener(), _Listener()]
        source: EventSource[int] = EventSource("Numbers")
        for listener in listeners:
            source.subscribe(listener.on_event)
        asyncio.run(source.publish(1))
        assert [l.received for l in listeners] == [[1], [1]]

    def test_bound_method_subscribers_are_weak(self):
        source: EventSource[int] = EventSource("Numbers")
        listener = _Listener()
        source.subscribe(listener.on_event)
        assert source.subscriber_count == 1

        del listener
        gc.collect()

        assert source.subscriber_count == 0
        asyncio.run(source.publish(1))

    def test_plain_functions_are_kept_alive(self):
        received: list[int] = []
        source: EventSource[int] = EventSource("Numbers")
        source.subscribe(lambda p: received.append(p))
        gc.collect()
        asyncio.run(source.publish(3))
        assert received == [3]

    def test_unsubscribe(self):
        listener = _Listener()
        source: EventSource[int] = EventSource("Numbers")
        source.subscribe(listener.on_event)
        source.unsubscribe(listener.on_event)
        asyncio.run(source.publish(1))
        assert listener.received == []

    def test_clear(self):
        source: EventSource[int] = EventSource("Numbers")
        source.subscribe(print)
        source.clear()
        assert source.subscriber_count == 0

    def test_name(self):
        assert EventSource("RegistrationCompleted").name == "RegistrationCompleted"
