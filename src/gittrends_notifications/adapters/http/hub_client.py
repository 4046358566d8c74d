"""HTTP adapter – HttpHubInformationService.

Fetches notification hub registration info from the GitTrends Azure
Functions backend.  Transport errors and 5xx responses are retried with
``tenacity``; everything else maps onto the kernel error hierarchy.
"""
from __future__ import annotations

from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from gittrends_notifications.application.notifications.hub import NotificationHubInformation
from gittrends_notifications.kernel.errors import ExternalServiceError, SerializationError
from gittrends_notifications.kernel.errors import TimeoutError as AppTimeoutError
from gittrends_notifications.observability.logging import get_logger

__all__ = ["HttpHubInformationService"]

_log = get_logger(__name__)

_SERVICE_NAME = "notification-hub"


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class HttpHubInformationService:
    """:class:`HubInformationService` backed by ``httpx.AsyncClient``.

    Parameters
    ----------
    base_url:
        Root of the Functions app, e.g. ``https://gittrends.azurewebsites.net``.
    function_key:
        Sent as the ``x-functions-key`` header when non-empty.
    timeout:
        Per-request timeout in seconds.
    max_attempts:
        Total attempts including the first call.
    transport:
        Optional ``httpx`` transport (tests inject a mock transport).
    """

    PATH = "/api/GetNotificationHubInformation"

    def __init__(
        self,
        base_url: str,
        function_key: str = "",
        *,
        timeout: float = 10.0,
        max_attempts: int = 3,
        backoff_multiplier: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if function_key:
            headers["x-functions-key"] = function_key
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, headers=headers, transport=transport
        )
        self._max_attempts = max_attempts
        self._backoff_multiplier = backoff_multiplier

    async def __aenter__(self) -> "HttpHubInformationService":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_notification_hub_information(self) -> NotificationHubInformation:
        try:
            response = await self._get_with_retry()
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"Timed out fetching {self.PATH}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                _SERVICE_NAME,
                f"HTTP {exc.response.status_code} from GET {self.PATH}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(_SERVICE_NAME, str(exc), cause=exc) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise SerializationError(
                "Notification hub response is not JSON",
                payload_type=NotificationHubInformation.__name__,
                cause=exc,
            ) from exc
        return NotificationHubInformation.from_dict(payload)

    async def _get_with_retry(self) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff_multiplier, max=8),
            retry=retry_if_exception(_is_transient),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    _log.info("hub_information.retry", attempt=attempt.retry_state.attempt_number)
                response = await self._client.get(self.PATH)
                response.raise_for_status()
        return response  # type: ignore[return-value]
