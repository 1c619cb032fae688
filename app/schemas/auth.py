from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.schemas.user import UserResponse


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    user_id: UUID
    jti: str | None = None
    expires_at: datetime | None = None


class AuthResult(BaseModel):
    """Signup and login result: the user and a fresh access token."""

    model_config = ConfigDict(populate_by_name=True)

    user: UserResponse
    token: str


class UserData(BaseModel):
    """Payload of the current-user endpoint."""

    user: UserResponse
