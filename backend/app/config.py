"""Configuration for the liquidación trigger backend."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> float | None:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Base configuration for the Flask application."""

    MAKE_WEBHOOK_URL: str | None = os.getenv("MAKE_WEBHOOK_URL")
    WEBHOOK_ENRICHMENT: bool = _env_bool("WEBHOOK_ENRICHMENT", "true")
    WEBHOOK_SOURCE_TAG: str = os.getenv("WEBHOOK_SOURCE_TAG", "notion-embed")
    WEBHOOK_TIMEOUT: float | None = _env_float("WEBHOOK_TIMEOUT")
    JSONIFY_PRETTYPRINT_REGULAR: bool = False
    CORS_ALLOWED_ORIGINS: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
    TRIGGER_RATE_LIMIT: str = os.getenv("TRIGGER_RATE_LIMIT", "30 per minute")
    TRUSTED_PROXY_COUNT: int = int(os.getenv("TRUSTED_PROXY_COUNT", "0"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class WebhookSettings:
    """Explicit settings handed to the submission service."""

    url: str | None
    enrich: bool = True
    source_tag: str = "notion-embed"
    timeout: float | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> WebhookSettings:
        """Build settings from a Flask config mapping."""

        url = (config.get("MAKE_WEBHOOK_URL") or "").strip() or None
        timeout = config.get("WEBHOOK_TIMEOUT")
        return cls(
            url=url,
            enrich=bool(config.get("WEBHOOK_ENRICHMENT", True)),
            source_tag=config.get("WEBHOOK_SOURCE_TAG") or "notion-embed",
            timeout=float(timeout) if timeout is not None else None,
        )
