"""Time based identifiers attached to enriched payloads."""

from __future__ import annotations

import secrets
import string
import time

_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 6


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36."""

    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"

    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def _random_suffix() -> str:
    return "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(_SUFFIX_LENGTH))


def _build(prefix: str, now_ms: int | None) -> str:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{prefix}_{to_base36(now_ms)}_{_random_suffix()}"


def generate_session_id(now_ms: int | None = None) -> str:
    return _build("sess", now_ms)


def generate_request_id(now_ms: int | None = None) -> str:
    return _build("req", now_ms)
