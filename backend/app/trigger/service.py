"""Validate a month submission and forward it to the configured webhook."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

import requests

from ..config import WebhookSettings
from .context import build_request_context
from .errors import (
    ConfigurationError,
    InternalError,
    InvalidInput,
    SubmissionError,
    UpstreamError,
)
from .identifiers import generate_request_id, generate_session_id
from .models import SubmissionRequest, SubmissionResult, WebhookPayload
from .useragent import parse_user_agent

logger = logging.getLogger(__name__)

MIN_YEAR = 2000
_DIGITS = re.compile(r"[0-9]+")

PostCallable = Callable[..., requests.Response]


def parse_body(raw: str | bytes | None) -> dict[str, Any]:
    """Decode a raw JSON request body.

    Malformed JSON propagates as :class:`json.JSONDecodeError`. Values that
    are not JSON objects are treated as an empty object.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    data = json.loads(raw or "")
    return data if isinstance(data, dict) else {}


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        return int(text) if _DIGITS.fullmatch(text) else None
    return None


def validate_submission(payload: Mapping[str, Any]) -> SubmissionRequest:
    """Return a :class:`SubmissionRequest` or raise :class:`InvalidInput`."""

    month = _coerce_int(payload.get("month"))
    if month is None or not 1 <= month <= 12:
        raise InvalidInput("invalid month")

    year = _coerce_int(payload.get("year"))
    if year is None or year < MIN_YEAR:
        raise InvalidInput("invalid year")

    return SubmissionRequest(month=month, year=year)


def format_timestamp(moment: datetime) -> str:
    """Format a moment as UTC ISO-8601 with millisecond precision."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    timestamp = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    return timestamp.replace("+00:00", "Z")


def build_payload(
    request: SubmissionRequest,
    timestamp: str,
    headers: Mapping[str, str] | None,
    settings: WebhookSettings,
    now_ms: int | None = None,
) -> WebhookPayload:
    """Assemble the outbound payload, enriching it when enabled."""

    if not settings.enrich:
        return WebhookPayload(month=request.month, year=request.year, timestamp=timestamp)

    context = build_request_context(headers)
    return WebhookPayload(
        month=request.month,
        year=request.year,
        timestamp=timestamp,
        context=context,
        device=parse_user_agent(context.user_agent),
        session_id=generate_session_id(now_ms),
        request_id=generate_request_id(now_ms),
        source=settings.source_tag,
    )


def _read_text(response: requests.Response) -> str:
    try:
        return response.text or ""
    except (UnicodeDecodeError, LookupError, requests.RequestException):
        return ""


def forward_payload(
    url: str,
    payload: WebhookPayload,
    timeout: float | None = None,
    post: PostCallable | None = None,
) -> requests.Response:
    """POST the payload once and raise :class:`UpstreamError` on rejection."""

    post = post or requests.post
    try:
        response = post(
            url,
            json=payload.to_dict(),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.warning("Webhook request failed: %s", exc)
        raise InternalError.from_exception(exc) from exc

    if not response.ok:
        body = _read_text(response)
        logger.warning("Webhook rejected submission with status %s", response.status_code)
        raise UpstreamError(response.status_code, body)
    return response


def _submit(
    body: Mapping[str, Any] | str | bytes | None,
    headers: Mapping[str, str] | None,
    settings: WebhookSettings,
    now: datetime | None,
    post: PostCallable | None,
) -> SubmissionResult:
    payload = body if isinstance(body, Mapping) else parse_body(body)
    request = validate_submission(payload)

    if not settings.url:
        logger.error("MAKE_WEBHOOK_URL is not configured; submission rejected")
        raise ConfigurationError("MAKE_WEBHOOK_URL is not configured")

    moment = now or datetime.now(UTC)
    timestamp = format_timestamp(moment)
    webhook_payload = build_payload(
        request,
        timestamp,
        headers,
        settings,
        now_ms=int(moment.timestamp() * 1000),
    )

    forward_payload(settings.url, webhook_payload, timeout=settings.timeout, post=post)
    logger.info("Forwarded submission for %02d/%s", request.month, request.year)

    return SubmissionResult.success(request, timestamp, webhook_payload.session_id)


def submit(
    body: Mapping[str, Any] | str | bytes | None,
    headers: Mapping[str, str] | None,
    settings: WebhookSettings,
    *,
    now: datetime | None = None,
    post: PostCallable | None = None,
) -> SubmissionResult:
    """Process one submission end to end.

    Every failure is converted into a :class:`SubmissionResult` with
    ``ok=False`` and the matching HTTP status; nothing is raised.
    """
    try:
        return _submit(body, headers, settings, now, post)
    except SubmissionError as exc:
        return SubmissionResult.failure(exc.status, exc.message)
    except Exception as exc:
        logger.exception("Unexpected failure while processing submission")
        error = InternalError.from_exception(exc)
        return SubmissionResult.failure(error.status, error.message)
