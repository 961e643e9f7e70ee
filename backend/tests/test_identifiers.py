"""Tests for session and request identifier generation."""

from __future__ import annotations

import re

import pytest

from backend.app.trigger.identifiers import (
    generate_request_id,
    generate_session_id,
    to_base36,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "0"), (35, "z"), (36, "10"), (1_700_000_000_000, "loyw3v28")],
)
def test_to_base36(value, expected):
    assert to_base36(value) == expected


def test_to_base36_rejects_negative_values():
    with pytest.raises(ValueError):
        to_base36(-1)


def test_session_id_shape():
    session_id = generate_session_id(1_700_000_000_000)

    assert re.fullmatch(r"sess_loyw3v28_[0-9a-z]{6}", session_id)


def test_request_id_uses_current_time_by_default():
    request_id = generate_request_id()

    assert re.fullmatch(r"req_[0-9a-z]+_[0-9a-z]{6}", request_id)
