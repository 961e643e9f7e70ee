"""Derive request metadata from inbound HTTP headers."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import unquote

from .models import DIRECT, UNKNOWN, RequestContext

_IP_HEADERS = ("x-real-ip", "cf-connecting-ip")


def _normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    return {str(name).lower(): str(value) for name, value in headers.items()}


def _first_entry(value: str | None) -> str | None:
    """Return the first comma separated entry of a header value."""

    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def resolve_client_ip(headers: Mapping[str, str] | None) -> str:
    """Return the originating client address as reported by proxies."""

    normalized = _normalize_headers(headers)
    forwarded = _first_entry(normalized.get("x-forwarded-for"))
    if forwarded:
        return forwarded
    for name in _IP_HEADERS:
        value = normalized.get(name, "").strip()
        if value:
            return value
    return UNKNOWN


def build_request_context(headers: Mapping[str, str] | None) -> RequestContext:
    """Build a :class:`RequestContext` from a header mapping.

    Header names are matched case-insensitively. Missing headers fall back to
    ``"Unknown"`` (``"Direct"`` for the referrer); nothing here raises.
    """
    normalized = _normalize_headers(headers)

    def header(name: str, default: str = UNKNOWN) -> str:
        return normalized.get(name) or default

    city = normalized.get("x-vercel-ip-city")
    return RequestContext(
        ip=resolve_client_ip(normalized),
        country=header("x-vercel-ip-country"),
        city=unquote(city) if city else UNKNOWN,
        region=header("x-vercel-ip-country-region"),
        timezone=header("x-vercel-ip-timezone"),
        user_agent=header("user-agent"),
        language=_first_entry(normalized.get("accept-language")) or UNKNOWN,
        referrer=header("referer", DIRECT),
    )
