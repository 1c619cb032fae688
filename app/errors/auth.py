"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.configs import INVALID_CREDENTIALS
from app.errors.base import BaseAppError, ErrorKind, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class UnauthenticatedError(BaseAppError):
    """Base class for authentication errors (missing, invalid or expired credentials)."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, detail: str = "Authentication failed") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class MissingTokenError(UnauthenticatedError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("Access denied. No token provided.")


class InvalidCredentialsError(UnauthenticatedError):
    """Raised for an unknown email and for a wrong password alike."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS)


class TokenExpiredError(UnauthenticatedError):
    """Raised when a token's ``exp`` claim is in the past."""

    def __init__(self) -> None:
        super().__init__("Token expired. Please login again.")


class InvalidTokenError(UnauthenticatedError):
    """Raised when a token is malformed, badly signed or carries wrong claims."""

    def __init__(self) -> None:
        super().__init__("Invalid token.")


class UserNotFoundError(UnauthenticatedError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self) -> None:
        super().__init__("User not found. Token invalid.")


class ForbiddenError(BaseAppError):
    """Raised when an authenticated caller is not the owner of a resource."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, detail: str = "You are not authorized to perform this action") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
