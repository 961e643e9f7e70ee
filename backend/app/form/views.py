"""Server rendered form for triggering a monthly liquidación."""

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus

from flask import Blueprint, current_app, render_template, request

from ..config import WebhookSettings
from ..trigger import submit
from .state import MONTH_NAMES, FormState, FormStatus

bp = Blueprint("form", __name__)


def _today() -> datetime:
    return datetime.now()


def _parse_month(value: str | None) -> int | None:
    text = (value or "").strip()
    if not (text.isascii() and text.isdigit()):
        return None
    month = int(text)
    return month if 1 <= month <= 12 else None


def _render(state: FormState) -> tuple[str, int]:
    html = render_template(
        "form/index.html",
        state=state,
        statuses=FormStatus,
        months=list(enumerate(MONTH_NAMES, start=1)),
    )
    return html, HTTPStatus.OK


@bp.get("/")
def index() -> tuple[str, int]:
    today = _today()
    month = _parse_month(request.args.get("month")) or today.month
    return _render(FormState(month=month, year=today.year))


@bp.post("/confirm")
def confirm() -> tuple[str, int]:
    # The dialog shows and posts back the month /submit will send, so an
    # unparseable value falls back to today here; /submit reports "invalid month".
    today = _today()
    month = _parse_month(request.form.get("month")) or today.month
    state = FormState(month=month, year=today.year)
    return _render(state.request_confirmation())


@bp.post("/submit")
def submit_form() -> tuple[str, int]:
    today = _today()
    raw_month = request.form.get("month")
    state = FormState(
        month=_parse_month(raw_month) or today.month,
        year=today.year,
        status=FormStatus.CONFIRM,
    )

    if request.form.get("action") == "cancel":
        return _render(state.cancel())

    state = state.start_submission()
    settings = WebhookSettings.from_config(current_app.config)
    result = submit({"month": raw_month, "year": today.year}, request.headers, settings)
    if not result.ok:
        current_app.logger.info("Form submission failed: %s", result.error)
    return _render(state.complete(result))


@bp.post("/reset")
def reset() -> tuple[str, int]:
    today = _today()
    month = _parse_month(request.form.get("month")) or today.month
    try:
        status = FormStatus(request.form.get("status", FormStatus.ERROR.value))
        state = FormState(month=month, year=today.year, status=status).reset()
    except ValueError:
        state = FormState(month=month, year=today.year)
    return _render(state)
