"""Compatibility package that exposes the backend Flask application factory."""

from backend.app import Config, create_app
from backend.app.config import WebhookSettings

__all__ = ["Config", "WebhookSettings", "create_app"]
