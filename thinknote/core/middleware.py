from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from thinknote.core.errors import AppError, RateLimitError, RequestTooLargeError
from thinknote.core.handlers import handle_app_error
from thinknote.core.logging import log_context
from thinknote.core.rate_limit import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)


def _client_key(request: Request) -> str:
    forwarded_for = (request.headers.get("x-forwarded-for") or "").split(",")[0].strip()
    if forwarded_for:
        return forwarded_for
    return request.client.host if request.client else "unknown"


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length")
    return int(raw) if raw and raw.isdigit() else None


async def _buffer_body(request: Request, max_bytes: int) -> None:
    """Read the body once, refusing anything over ``max_bytes`` before routing."""
    declared = _declared_length(request)
    if declared is not None and declared > max_bytes:
        raise RequestTooLargeError("Request body too large.")

    received = bytearray()
    async for chunk in request.stream():
        received += chunk
        if len(received) > max_bytes:
            raise RequestTooLargeError("Request body too large.")
    # Downstream handlers read the cached body instead of the consumed stream.
    request._body = bytes(received)


def _check_rate_limit(request: Request) -> None:
    limiter: SlidingWindowRateLimiter | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return
    client = _client_key(request)
    if not limiter.allow(client):
        logger.warning("rate limit exceeded", extra={"client_ip": client})
        raise RateLimitError("Too many requests.")


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.request_id = request_id

    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        try:
            await _buffer_body(request, request.app.state.settings.max_request_bytes)
            _check_rate_limit(request)
        except AppError as exc:
            # Exception handlers do not see errors raised inside BaseHTTPMiddleware.
            response: Response = await handle_app_error(request, exc)
        else:
            response = await call_next(request)

        response.headers["X-Request-Id"] = request_id
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response
