"""Instance-scoped observer registry with weak-referenced subscribers.

Bound-method handlers are held through :class:`weakref.WeakMethod`, so a
subscriber object that goes out of scope is dropped silently instead of being
kept alive by the publisher.  Plain functions (and lambdas) are held strongly
because nothing else usually references them.
"""

from __future__ import annotations

import inspect
import weakref
from typing import Any, Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")

#: A subscriber: sync or async callable receiving the event payload.
Handler = Callable[[T], "Awaitable[None] | None"]


class EventSource(Generic[T]):
    """Publish a payload of type ``T`` to every live subscriber.

    Example::

        completed: EventSource[bool] = EventSource("InitializationCompleted")
        completed.subscribe(view_model.on_initialized)
        await completed.publish(True)
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._handlers: list[Callable[[], Handler[T] | None]] = []

    @property
    def name(self) -> str:
        return self._name

    def subscribe(self, handler: Handler[T]) -> None:
        """Register *handler*; bound methods are referenced weakly."""
        if inspect.ismethod(handler):
            self._handlers.append(weakref.WeakMethod(handler))
        else:
            self._handlers.append(lambda h=handler: h)

    def unsubscribe(self, handler: Handler[T]) -> None:
        """Remove every registration equal to *handler*."""
        self._handlers = [ref for ref in self._handlers if ref() not in (None, handler)]

    @property
    def subscriber_count(self) -> int:
        """Number of subscribers still alive."""
        return sum(1 for ref in self._handlers if ref() is not None)

    async def publish(self, payload: T) -> None:
        """Invoke live handlers in subscription order, awaiting async ones."""
        live: list[Handler[T]] = []
        alive_refs: list[Callable[[], Handler[T] | None]] = []
        for ref in self._handlers:
            handler = ref()
            if handler is not None:
                live.append(handler)
                alive_refs.append(ref)
        self._handlers = alive_refs

        for handler in live:
            result: Any = handler(payload)
            if inspect.isawaitable(result):
                await result

    def clear(self) -> None:
        self._handlers.clear()


__all__ = ["EventSource", "Handler"]
