"""Logger factory and re-exports of the logging configuration."""

import structlog
from structlog.stdlib import BoundLogger

from webhook_notifier.shared.logging_config import (
    configure_structlog,
    redact_sensitive_fields,
    setup_logging,
)


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("webhook_delivered", status_code=204)
    """
    return structlog.get_logger(name)


__all__ = [
    "get_logger",
    "configure_structlog",
    "redact_sensitive_fields",
    "setup_logging",
]
