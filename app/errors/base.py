from collections.abc import Awaitable, Callable
from enum import StrEnum

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from app.configs import DEFAULT_ERROR_MESSAGE
from app.monitoring import get_request_id
from app.utils.helpers import host


class ErrorKind(StrEnum):
    """Tag carried by every application error."""

    VALIDATION_FAILED = "ValidationFailed"
    UNAUTHENTICATED = "Unauthenticated"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    INTERNAL = "Internal"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_response(message: str, status_code: int) -> ORJSONResponse:
    """Render the uniform ``{success: false, message}`` error body."""
    return ORJSONResponse(
        content={"success": False, "message": message},
        status_code=status_code,
    )


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Internal errors are logged with their traceback; expected outcomes
    (validation, ownership, not-found) are logged at info level only.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        kind = getattr(exc, "kind", ErrorKind.INTERNAL)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        if kind is ErrorKind.INTERNAL:
            logger.error(
                "Unhandled application error",
                error=str(exc),
                kind=str(kind),
                path=request.url.path,
                method=request.method,
                ip=host(request),
                request_id=get_request_id(),
                exc_info=exc,
            )
            # Only application errors expose their detail
            if not isinstance(exc, BaseAppError):
                detail = DEFAULT_ERROR_MESSAGE
        else:
            logger.info(
                detail,
                kind=str(kind),
                path=request.url.path,
                method=request.method,
                ip=host(request),
            )

        return error_response(detail, status_code)

    return handler
