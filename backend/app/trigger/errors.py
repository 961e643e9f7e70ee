"""Error taxonomy for webhook submissions."""

from __future__ import annotations

from http import HTTPStatus


class SubmissionError(Exception):
    """Base class for failures surfaced to the caller as ``ok: false``."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(SubmissionError):
    """Raised when the month or year cannot be accepted."""

    status = HTTPStatus.BAD_REQUEST


class ConfigurationError(SubmissionError):
    """Raised when the destination webhook URL is missing."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR


class UpstreamError(SubmissionError):
    """Raised when the webhook answers with a non-success status."""

    status = HTTPStatus.BAD_GATEWAY

    def __init__(self, upstream_status: int, body: str = "") -> None:
        super().__init__(f"webhook responded {upstream_status}. {body}")
        self.upstream_status = upstream_status
        self.body = body


class InternalError(SubmissionError):
    """Raised for any unexpected failure while processing a submission."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    @classmethod
    def from_exception(cls, exc: BaseException) -> InternalError:
        return cls(str(exc) or "unknown error")
