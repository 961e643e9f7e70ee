"""Endpoint forwarding a month submission to the configured webhook."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..config import WebhookSettings
from ..extensions import limiter
from ..trigger import submit

bp = Blueprint("trigger", __name__)


def _rate_limit() -> str:
    return current_app.config.get("TRIGGER_RATE_LIMIT") or "30 per minute"


@bp.post("/trigger")
@limiter.limit(_rate_limit)
def trigger() -> tuple[object, int]:
    """Validate a month submission and forward it to the configured webhook."""
    settings = WebhookSettings.from_config(current_app.config)
    result = submit(request.get_data(), request.headers, settings)
    if not result.ok:
        current_app.logger.info("Submission rejected (%s): %s", int(result.status), result.error)
    return jsonify(result.to_dict()), result.status
