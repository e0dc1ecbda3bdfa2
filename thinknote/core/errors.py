class AppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(AppError):
    """Client sent a malformed or invalid request (400)."""

    status_code = 400
    code = "invalid_request"


class RequestTooLargeError(AppError):
    """Request body or upload exceeds the configured size limit (413)."""

    status_code = 413
    code = "request_too_large"


class RateLimitError(AppError):
    """Client has exceeded rate limits (429)."""

    status_code = 429
    code = "rate_limit_exceeded"


class ExternalServiceError(AppError):
    """Upstream provider failed or returned an invalid response (502)."""

    status_code = 502
    code = "external_service_error"


class NotReadyError(AppError):
    """Service is temporarily unavailable (503)."""

    status_code = 503
    code = "not_ready"
