"""webhook-notifier — single-shot webhook delivery for a multi-channel dispatcher."""

from webhook_notifier.errors import (
    WebhookError,
    WebhookRequestError,
    WebhookStatusError,
    WebhookTimeoutError,
    WebhookTransportError,
)
from webhook_notifier.infrastructure.http_client import HttpClient
from webhook_notifier.infrastructure.webhook import (
    Notifier,
    WebhookSender,
    webhook_sender_from_settings,
)

__all__ = [
    "HttpClient",
    "Notifier",
    "WebhookSender",
    "webhook_sender_from_settings",
    "WebhookError",
    "WebhookRequestError",
    "WebhookStatusError",
    "WebhookTimeoutError",
    "WebhookTransportError",
]

__version__ = "0.1.0"
