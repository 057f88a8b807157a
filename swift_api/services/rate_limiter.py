"""
Rate Limiting for the Books Endpoints

The /books routes are split into two classes, each with one counter per
client shared by every route in the class:

- book reads (list, get by id): RATE_LIMIT_READ, 100/minute by default
- book writes (create, replace, delete): RATE_LIMIT_WRITE, 30/minute

Routers apply `read_limit` or `write_limit` as a decorator. Exhausting the
write budget does not block reads, and the reverse.

Counters live in process memory (fixed windows). RATE_LIMIT_ENABLED=false
switches limiting off.
"""

import logging
import math
import time

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from swift_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

READ_SCOPE = "books:read"
WRITE_SCOPE = "books:write"

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

read_limit = limiter.shared_limit(
    settings.rate_limit_read,
    scope=READ_SCOPE,
    error_message="Too many book reads from this client",
)
write_limit = limiter.shared_limit(
    settings.rate_limit_write,
    scope=WRITE_SCOPE,
    error_message="Too many book writes from this client",
)


def retry_after_seconds(request: Request, exc: RateLimitExceeded) -> int:
    """
    Seconds until the client's current window for the exceeded limit resets.

    Falls back to the full window length when the counter cannot be read.
    """
    item = exc.limit.limit
    window = item.get_expiry()

    hit = getattr(request.state, "view_rate_limit", None)
    if hit is None:
        return window

    reset_at = limiter.limiter.get_window_stats(hit[0], *hit[1])[0]
    return min(window, max(1, math.ceil(reset_at - time.time())))


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 naming the exhausted budget, with Retry-After from its window."""
    retry_after = retry_after_seconds(request, exc)
    limit = str(exc.limit.limit)

    logger.warning(
        f"{exc.limit.scope} limit {limit} exceeded by {get_remote_address(request)}"
    )

    return JSONResponse(
        status_code=429,
        content={"detail": exc.detail, "limit": limit, "retryAfter": retry_after},
        headers={"Retry-After": str(retry_after)},
    )
