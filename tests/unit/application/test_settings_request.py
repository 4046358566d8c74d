"""Unit tests – PendingSettingsRequest single-slot continuation."""
from __future__ import annotations

import asyncio

import pytest

from gittrends_notifications.application.notifications import AccessState, PendingSettingsRequest
from gittrends_notifications.kernel.errors import ConflictError, RegistrationInProgressError


class TestPendingSettingsRequest:
    def test_starts_empty(self):
        request = PendingSettingsRequest()
        assert not request.is_pending
        assert request.fulfill(AccessState.AVAILABLE) is False

    def test_fulfill_resolves_waiter(self):
        async def run():
            request = PendingSettingsRequest()
            future = request.open()
            assert request.is_pending
            assert request.fulfill(AccessState.RESTRICTED) is True
            assert await future is AccessState.RESTRICTED
            assert not request.is_pending
        asyncio.run(run())

    def test_second_open_is_rejected(self):
        async def run():
            request = PendingSettingsRequest()
            first = request.open()
            with pytest.raises(RegistrationInProgressError) as exc_info:
                request.open()
            assert isinstance(exc_info.value, ConflictError)
            assert not first.done()
        asyncio.run(run())

    def test_fail_propagates_to_waiter(self):
        async def run():
            request = PendingSettingsRequest()
            future = request.open()
            request.fail(RuntimeError("boom"))
            with pytest.raises(RuntimeError, match="boom"):
                await future
        asyncio.run(run())

    def test_clear_with_other_owner_is_ignored(self):
        async def run():
            request = PendingSettingsRequest()
            request.open()
            stranger: asyncio.Future[AccessState] = asyncio.get_running_loop().create_future()
            request.clear(stranger)
            assert request.is_pending
        asyncio.run(run())

    def test_clear_cancels_open_waiter(self):
        async def run():
            request = PendingSettingsRequest()
            future = request.open()
            request.clear()
            assert future.cancelled()
            assert not request.is_pending
            request.open()
        asyncio.run(run())
