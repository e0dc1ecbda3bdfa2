from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from thinknote.core.errors import AppError
from thinknote.core.logging import log_context

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str) -> dict[str, dict[str, str]]:
    return {"error": {"code": code, "message": message}}


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    request.state.error_code = exc.code
    # Client errors are logged where they are raised; only 5xx is logged here.
    if exc.status_code >= 500:
        request_id = getattr(request.state, "request_id", None)
        with log_context(request_id=request_id, method=request.method, path=request.url.path):
            logger.error(
                "%s",
                exc.detail,
                extra={
                    "error_code": exc.code,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code, exc.detail))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    request.state.error_code = "invalid_request"
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    logger.warning("Invalid request", extra={"error_code": "invalid_request", "fields": fields})
    return JSONResponse(status_code=400, content=_error_body("invalid_request", "Invalid request"))
