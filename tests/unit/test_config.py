"""Unit tests for settings and the settings-driven factory."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from webhook_notifier.config import LoggingSettings, WebhookSettings
from webhook_notifier.infrastructure.http_client import HttpClient
from webhook_notifier.infrastructure.webhook import webhook_sender_from_settings


class TestWebhookSettings:
    def test_loads_url_and_timeout(self, monkeypatch):
        monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com/abc")
        monkeypatch.setenv("WEBHOOK_TIMEOUT_SECONDS", "3")
        settings = WebhookSettings()
        assert settings.webhook_url == "https://hooks.example.com/abc"
        assert settings.webhook_timeout_seconds == 3

    def test_default_timeout(self, monkeypatch):
        monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com/abc")
        monkeypatch.delenv("WEBHOOK_TIMEOUT_SECONDS", raising=False)
        assert WebhookSettings().webhook_timeout_seconds == 10

    def test_missing_url_raises(self, monkeypatch):
        monkeypatch.delenv("WEBHOOK_URL", raising=False)
        with pytest.raises(PydanticValidationError):
            WebhookSettings()


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        settings = LoggingSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert LoggingSettings().log_format == "json"


class TestSenderFromSettings:
    def test_explicit_settings(self):
        settings = WebhookSettings(
            webhook_url="https://hooks.example.com/x", webhook_timeout_seconds=7
        )
        sender = webhook_sender_from_settings(settings)
        assert sender.endpoint == "https://hooks.example.com/x"
        assert sender.timeout_seconds == 7

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com/env")
        sender = webhook_sender_from_settings()
        assert sender.endpoint == "https://hooks.example.com/env"

    async def test_passes_shared_client(self):
        http = HttpClient()
        settings = WebhookSettings(webhook_url="https://hooks.example.com/x")
        sender = webhook_sender_from_settings(settings, http_client=http)
        assert sender._http is http
        await http.aclose()
