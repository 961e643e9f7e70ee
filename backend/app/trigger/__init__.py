"""Month submission pipeline: validation, enrichment and webhook delivery."""

from .errors import (
    ConfigurationError,
    InternalError,
    InvalidInput,
    SubmissionError,
    UpstreamError,
)
from .models import DeviceInfo, RequestContext, SubmissionRequest, SubmissionResult, WebhookPayload
from .service import submit

__all__ = [
    "ConfigurationError",
    "DeviceInfo",
    "InternalError",
    "InvalidInput",
    "RequestContext",
    "SubmissionError",
    "SubmissionRequest",
    "SubmissionResult",
    "UpstreamError",
    "WebhookPayload",
    "submit",
]
