from __future__ import annotations

import pathlib
import sys
from dataclasses import dataclass, field
from typing import Any

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_dependencies():
    from liquidacion_trigger import Config, create_app

    return Config, create_app


ConfigBase, create_app = _load_dependencies()

WEBHOOK_URL = "https://hook.example.test/abc123"


class TestConfig(ConfigBase):
    TESTING = True
    MAKE_WEBHOOK_URL = WEBHOOK_URL
    WEBHOOK_ENRICHMENT = True
    WEBHOOK_SOURCE_TAG = "notion-embed"
    WEBHOOK_TIMEOUT = None
    RATELIMIT_ENABLED = False
    CORS_ALLOWED_ORIGINS = "http://localhost"


class UnconfiguredConfig(TestConfig):
    MAKE_WEBHOOK_URL = None


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, status_code: int = 200, text: str = "Accepted") -> None:
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400


@dataclass
class RecordingPost:
    """Callable replacing ``requests.post`` that records every call."""

    response: FakeResponse = field(default_factory=FakeResponse)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        return self.response


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    ctx = app.app_context()
    ctx.push()
    yield app
    ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def unconfigured_client():
    return create_app(UnconfiguredConfig).test_client()


@pytest.fixture()
def webhook(monkeypatch: pytest.MonkeyPatch) -> RecordingPost:
    from backend.app.trigger import service

    recorder = RecordingPost()
    monkeypatch.setattr(service.requests, "post", recorder)
    return recorder
