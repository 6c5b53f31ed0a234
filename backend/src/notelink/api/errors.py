"""Translation of domain errors into HTTP responses."""

from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NoteLinkError,
    NotFoundError,
    RateLimitExceededError,
    SigningError,
    StorageError,
    TokenError,
    ValidationError,
)
from ..core.logging import get_logger
from ..core.schemas.common import ErrorResponse

logger = get_logger("api.errors")

# Checked in order; the first matching class wins
ERROR_STATUS = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (TokenError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateUsernameError, status.HTTP_409_CONFLICT),
    (RateLimitExceededError, status.HTTP_429_TOO_MANY_REQUESTS),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (SigningError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

GENERIC_SERVER_ERROR = "Internal server error"


def status_for(exc: NoteLinkError) -> int:
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(
    status_code: int,
    error: str,
    message: str,
    field: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, field=field)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def notelink_error_handler(request: Request, exc: NoteLinkError) -> JSONResponse:
    """Map a domain error to its status code.

    Server-side failures are logged with their cause and answered with a
    generic message so storage details never reach the client.
    """
    status_code = status_for(exc)
    headers: Dict[str, str] = {}

    if status_code >= 500:
        cause = getattr(exc, "cause", None)
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            exc_info=cause,
            extra={"method": request.method, "path": request.url.path},
        )
        message = GENERIC_SERVER_ERROR
    else:
        message = exc.message

    if isinstance(exc, TokenError):
        headers["WWW-Authenticate"] = "Bearer"
    elif isinstance(exc, RateLimitExceededError):
        headers["Retry-After"] = str(exc.retry_after)
        headers["X-RateLimit-Limit"] = str(exc.limit)

    return _error_response(
        status_code,
        error=type(exc).__name__,
        message=message,
        field=getattr(exc, "field", None),
        headers=headers or None,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies, query strings and path ids are plain bad input."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location) or None
    message = first.get("msg", "Invalid request")
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        error="ValidationError",
        message=f"{field}: {message}" if field else message,
        field=field,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoteLinkError, notelink_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
