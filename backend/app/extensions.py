"""Extensions used by the Flask application."""

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def _limiter_key_func() -> str:
    # ``remote_addr`` only reflects forwarded headers once ProxyFix trusts them.
    return f"ip:{get_remote_address()}"


cors = CORS()
limiter = Limiter(key_func=_limiter_key_func, default_limits=[])

__all__ = ["cors", "limiter"]
