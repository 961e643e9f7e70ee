"""Tests for the healthcheck endpoint."""

from __future__ import annotations

from liquidacion_trigger import Config, create_app


class HealthConfig(Config):
    """Configuration used during testing."""

    TESTING = True
    MAKE_WEBHOOK_URL = "https://hook.example.test/health"
    RATELIMIT_ENABLED = False


class MissingWebhookConfig(HealthConfig):
    MAKE_WEBHOOK_URL = None


def test_health_endpoint_returns_ok():
    """The healthcheck endpoint should report ok and the webhook configuration."""

    client = create_app(HealthConfig).test_client()

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "webhookConfigured": True}


def test_health_endpoint_flags_missing_webhook():
    client = create_app(MissingWebhookConfig).test_client()

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["webhookConfigured"] is False
