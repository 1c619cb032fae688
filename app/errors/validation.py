"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.errors.base import BaseAppError, ErrorKind, error_response
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)

INVALID_ID_FORMAT = "Invalid ID format"


class ValidationFailedError(BaseAppError):
    """Raised when input is missing or malformed."""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, detail: str = "Validation failed") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


def format_validation_errors(errors: list[dict]) -> str:
    """
    Join field-level validation messages into one message.

    Args:
        errors: Error dictionaries as produced by pydantic.

    Returns:
        A single ``"field: message, field: message"`` string, or
        ``"Invalid ID format"`` when a path parameter is malformed.

    Examples:
    --------
    >>> format_validation_errors([{"loc": ("body", "title"), "msg": "Field required"}])
    'title: Field required'
    """
    messages = []
    for error in errors:
        loc = error.get("loc", ())
        if loc and loc[0] == "path":
            return INVALID_ID_FORMAT
        # Skip the 'body'/'query'/'path' location prefix
        field = ".".join(str(part) for part in loc[1:])
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return ", ".join(messages)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic request validation errors with the uniform error body.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with a single joined message and status 400.
    """
    exec_error = cast(RequestValidationError, exc)
    message = format_validation_errors(list(exec_error.errors()))

    logger.info(
        "Request validation failed",
        ip=host(request),
        path=request.url.path,
        errors=message,
    )

    return error_response(message, HTTP_400_BAD_REQUEST)
