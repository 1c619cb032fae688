from app.managers.password_manager import (
    PasswordHasher,
    dummy_verify,
    get_password_hasher,
    hash_password,
    verify_password,
)
from app.managers.rate_limiter import (
    BLOG_WRITE_LIMIT,
    LOGIN_LIMIT,
    SIGNUP_LIMIT,
    limiter,
    rate_limit_exceeded_handler,
)
from app.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "BLOG_WRITE_LIMIT",
    "LOGIN_LIMIT",
    "SIGNUP_LIMIT",
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "dummy_verify",
    "get_password_hasher",
    "hash_password",
    "limiter",
    "rate_limit_exceeded_handler",
    "verify_password",
]
