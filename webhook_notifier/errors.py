"""
Webhook delivery error hierarchy.

WebhookError is the base for every failure a send can report. Task
cancellation is not part of the hierarchy: asyncio.CancelledError is left
to propagate so callers can always tell it apart from a timeout.
"""

from __future__ import annotations

from typing import Any, Optional


class WebhookError(Exception):
    """Base webhook error. All typed errors inherit from this."""

    error_code: str = "webhook_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class WebhookRequestError(WebhookError):
    """The request could not be built: malformed endpoint or unsupported scheme."""

    error_code = "request_error"


class WebhookTransportError(WebhookError):
    """DNS, connection or TLS failure reported by the network stack."""

    error_code = "transport_error"


class WebhookTimeoutError(WebhookError):
    """The configured client-side deadline elapsed before the response arrived."""

    error_code = "timeout"


class WebhookStatusError(WebhookError):
    """The endpoint answered with a status outside 200-299."""

    error_code = "status_error"

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        status = f"{status_code} {reason_phrase}" if reason_phrase else str(status_code)
        super().__init__(
            f"webhook returned status {status}",
            details={"status_code": status_code},
        )
