"""Request body size limit middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.config import settings

logger = logging.getLogger(__name__)


def _declared_size(request: Request) -> int | None:
    """Content-Length as an int, or None when absent or malformed."""
    content_length = request.headers.get("content-length")
    if not content_length:
        return None
    try:
        return int(content_length)
    except ValueError:
        return None


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject oversized payloads before they are read.

    Parse requests carry whole documents (block lists or HTML exports), so the
    limit is checked against Content-Length up front.
    """

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size or settings.max_request_size_bytes

    async def dispatch(self, request: Request, call_next):
        size = _declared_size(request)

        if size is not None and size > self.max_size:
            logger.warning(
                f"Rejected {request.method} {request.url.path}: {size} bytes (max: {self.max_size})",
                extra={"content_length": size, "max_size": self.max_size},
            )
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body exceeds maximum size of {self.max_size} bytes"},
            )

        return await call_next(request)
