"""Generic webhook implementation of Notifier.

POSTs a caller-formatted JSON message to a fixed endpoint and classifies the
outcome by status code. The message is opaque: it is sent byte-for-byte and
never parsed, and the subject is ignored.
"""

import asyncio
from datetime import timedelta
from typing import Optional

import httpx

from webhook_notifier.config import WebhookSettings
from webhook_notifier.errors import (
    WebhookRequestError,
    WebhookStatusError,
    WebhookTimeoutError,
    WebhookTransportError,
)
from webhook_notifier.infrastructure.http_client import HttpClient
from webhook_notifier.shared.logging import get_logger

log = get_logger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class WebhookSender:
    def __init__(
        self,
        endpoint: str,
        timeout: int,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout_seconds = timeout
        self._timeout = timedelta(seconds=timeout)
        self._http = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout_seconds(self) -> int:
        return self._timeout_seconds

    @property
    def timeout(self) -> timedelta:
        return self._timeout

    async def send(self, subject: str, message: str) -> None:
        """Deliver ``message`` once. ``subject`` is part of the Notifier
        signature but never reaches the wire.

        Raises a WebhookError subclass on failure. Cancelling the calling
        task aborts the request and re-raises asyncio.CancelledError.
        """
        # non-positive durations arm no deadline
        deadline = self._timeout.total_seconds() if self._timeout_seconds > 0 else None
        try:
            await asyncio.wait_for(self._deliver(message), timeout=deadline)
        except asyncio.TimeoutError as e:
            raise WebhookTimeoutError(
                f"webhook deadline exceeded after {self._timeout_seconds}s"
            ) from e

    async def _deliver(self, message: str) -> None:
        if self._http is not None:
            await self._post(self._http, message)
            return
        async with HttpClient(timeout=None) as http:
            await self._post(http, message)

    async def _post(self, http: HttpClient, message: str) -> None:
        try:
            body = message.encode("utf-8")
        except UnicodeEncodeError as e:
            raise WebhookRequestError(f"webhook message is not valid text: {e}") from e
        try:
            request = http.build_request(
                "POST",
                self._endpoint,
                content=body,
                headers=_HEADERS,
            )
        except httpx.InvalidURL as e:
            raise WebhookRequestError(f"invalid webhook endpoint: {e}") from e

        log.debug("webhook_sending", host=request.url.host)
        try:
            response = await http.send(request, stream=True)
        except httpx.UnsupportedProtocol as e:
            raise WebhookRequestError(f"invalid webhook endpoint: {e}") from e
        except httpx.TimeoutException as e:
            raise WebhookTimeoutError(f"webhook request timed out: {e}") from e
        except httpx.RequestError as e:
            raise WebhookTransportError(f"webhook request failed: {e}") from e

        # The body is never read, only released.
        try:
            status_code = response.status_code
        finally:
            await response.aclose()

        if not 200 <= status_code < 300:
            raise WebhookStatusError(
                status_code, httpx.codes.get_reason_phrase(status_code)
            )
        log.debug("webhook_delivered", host=request.url.host, status_code=status_code)


def webhook_sender_from_settings(
    settings: Optional[WebhookSettings] = None,
    http_client: Optional[HttpClient] = None,
) -> WebhookSender:
    settings = settings or WebhookSettings()
    return WebhookSender(
        settings.webhook_url,
        settings.webhook_timeout_seconds,
        http_client=http_client,
    )
