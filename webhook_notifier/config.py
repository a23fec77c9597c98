"""
Configuration via pydantic-settings.

Settings are loaded from environment variables (and .env file). The sender
itself never reads the environment; these only feed
``webhook_sender_from_settings`` and ``setup_logging``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class WebhookSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    webhook_url: str
    # 0 or less disables the client-side deadline
    webhook_timeout_seconds: int = 10


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production
