"""Health check endpoint."""

from flask import Blueprint, Response, current_app, jsonify

bp = Blueprint("health", __name__)


@bp.get("/health")
def health() -> tuple[Response, int]:
    """Return the service status and whether a webhook destination is set."""
    configured = bool((current_app.config.get("MAKE_WEBHOOK_URL") or "").strip())
    return jsonify({"status": "ok", "webhookConfigured": configured}), 200
