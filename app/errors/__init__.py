from app.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
    UnauthenticatedError,
    UserNotFoundError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, ErrorKind, create_exception_handler, error_response
from app.errors.database import (
    BlogNotFoundError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.password_hasher import PasswordHashingError, password_hashing_exception_handler
from app.errors.validation import (
    ValidationFailedError,
    format_validation_errors,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ErrorKind",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "TokenExpiredError",
    "UnauthenticatedError",
    "UserNotFoundError",
    "ValidationFailedError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_response",
    "format_validation_errors",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
