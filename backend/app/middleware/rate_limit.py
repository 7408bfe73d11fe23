"""Rate limiting middleware using SlowAPI."""

import hashlib
import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

logger = logging.getLogger(__name__)


def get_token_key(request: Request) -> str:
    """Extract caller identifier for rate limiting.

    Uses a hash of the bearer token when present, otherwise falls back to the
    IP address. The raw token is never used as a storage key.
    """
    authorization = request.headers.get("authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token:
        return f"token:{hashlib.sha256(token.encode()).hexdigest()[:16]}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_token_key,
    storage_uri=settings.rate_limit_storage_uri,
    default_limits=[f"{settings.rate_limit_general_per_minute}/minute"],
    headers_enabled=True,  # Include X-RateLimit-* headers in responses
    enabled=settings.rate_limit_enabled,
)


def rate_limit_parse():
    """Decorator for stateless parse endpoints."""
    return limiter.limit(f"{settings.rate_limit_parse_per_minute}/minute")
