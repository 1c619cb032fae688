"""Token manager for handling JWT access tokens with security claims."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from app.configs import settings
from app.errors.auth import InvalidTokenError, TokenExpiredError
from app.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def _secret(secret_key: str | None) -> str:
    return secret_key if secret_key is not None else settings.SECRET_KEY.get_secret_value()


def create_access_token(
    user_id: UUID,
    *,
    secret_key: str | None = None,
    expires_delta: timedelta | None = None,
    issued_at: datetime | None = None,
) -> str:
    """
    Create a new access token for a user.

    Args:
        user_id: User's UUID, stored in the ``sub`` claim
        secret_key: Signing key; defaults to ``settings.SECRET_KEY``
        expires_delta: Optional lifetime; defaults to ``ACCESS_TOKEN_EXPIRE_MINUTES``
        issued_at: Issue time; defaults to now

    Returns:
        str: Encoded JWT access token
    """
    now = issued_at or datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(user_id),
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + lifetime,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(to_encode, _secret(secret_key), algorithm=settings.ALGORITHM)


def decode_access_token(token: str, *, secret_key: str | None = None) -> TokenData:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string
        secret_key: Verification key; defaults to ``settings.SECRET_KEY``

    Returns:
        TokenData: The user id and token metadata

    Raises:
        TokenExpiredError: If the token is past its ``exp``
        InvalidTokenError: If the token is malformed, badly signed or has wrong claims
    """
    try:
        payload = jwt.decode(
            token,
            _secret(secret_key),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError from e
    except JWTError as e:
        raise InvalidTokenError from e

    subject: str | None = payload.get("sub")
    if not subject or payload.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError

    try:
        user_id = UUID(subject)
    except ValueError as e:
        raise InvalidTokenError from e

    exp = payload.get("exp")
    return TokenData(
        user_id=user_id,
        jti=payload.get("jti"),
        expires_at=datetime.fromtimestamp(exp, tz=UTC) if exp else None,
    )
