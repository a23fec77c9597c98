from webhook_notifier.infrastructure.webhook.protocol import Notifier
from webhook_notifier.infrastructure.webhook.sender import (
    WebhookSender,
    webhook_sender_from_settings,
)

__all__ = ["Notifier", "WebhookSender", "webhook_sender_from_settings"]
