"""Middleware components for request validation and protection."""

from app.middleware.rate_limit import get_token_key, limiter, rate_limit_parse
from app.middleware.size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestSizeLimitMiddleware",
    "get_token_key",
    "limiter",
    "rate_limit_parse",
]
