"""Value objects exchanged during a webhook submission."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

UNKNOWN = "Unknown"
DIRECT = "Direct"


@dataclass(frozen=True)
class SubmissionRequest:
    """A validated month/year pair."""

    month: int
    year: int


@dataclass(frozen=True)
class RequestContext:
    """Header level metadata of the inbound request."""

    ip: str = UNKNOWN
    country: str = UNKNOWN
    city: str = UNKNOWN
    region: str = UNKNOWN
    timezone: str = UNKNOWN
    user_agent: str = UNKNOWN
    language: str = UNKNOWN
    referrer: str = DIRECT


@dataclass(frozen=True)
class DeviceInfo:
    """Browser, operating system and form factor derived from a user agent."""

    browser: str
    browser_version: str
    os: str
    os_version: str
    device: str
    is_mobile: bool
    is_tablet: bool
    is_desktop: bool


@dataclass(frozen=True)
class WebhookPayload:
    """Body posted to the configured webhook."""

    month: int
    year: int
    timestamp: str
    context: RequestContext | None = None
    device: DeviceInfo | None = None
    session_id: str | None = None
    request_id: str | None = None
    source: str | None = None

    @property
    def enriched(self) -> bool:
        return self.context is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "month": self.month,
            "year": self.year,
            "timestamp": self.timestamp,
        }
        if self.context is not None:
            data["user"] = {
                "ip": self.context.ip,
                "country": self.context.country,
                "city": self.context.city,
                "region": self.context.region,
                "timezone": self.context.timezone,
                "sessionId": self.session_id,
                "language": self.context.language,
            }
        if self.device is not None:
            data["device"] = {
                "userAgent": self.context.user_agent if self.context else UNKNOWN,
                "browser": self.device.browser,
                "browserVersion": self.device.browser_version,
                "os": self.device.os,
                "osVersion": self.device.os_version,
                "device": self.device.device,
                "isMobile": self.device.is_mobile,
                "isTablet": self.device.is_tablet,
                "isDesktop": self.device.is_desktop,
            }
        if self.context is not None:
            data["session"] = {
                "referrer": self.context.referrer,
                "source": self.source,
                "timestamp": self.timestamp,
                "requestId": self.request_id,
            }
        return data


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submission as reported to the caller."""

    ok: bool
    status: int
    month: int | None = None
    year: int | None = None
    timestamp: str | None = None
    session_id: str | None = None
    error: str | None = None

    @classmethod
    def success(
        cls, request: SubmissionRequest, timestamp: str, session_id: str | None = None
    ) -> SubmissionResult:
        return cls(
            ok=True,
            status=HTTPStatus.OK,
            month=request.month,
            year=request.year,
            timestamp=timestamp,
            session_id=session_id,
        )

    @classmethod
    def failure(cls, status: int, error: str) -> SubmissionResult:
        return cls(ok=False, status=status, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body sent back to the caller."""

        if not self.ok:
            return {"ok": False, "error": self.error}

        body: dict[str, Any] = {
            "ok": True,
            "month": self.month,
            "year": self.year,
            "timestamp": self.timestamp,
        }
        if self.session_id:
            body["sessionId"] = self.session_id
        return body
