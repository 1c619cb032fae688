"""
User schemas for authentication.

Request models normalize their input (stripped names, lower-cased email)
so the service layer only sees canonical values.
"""

from datetime import datetime
from re import compile as re_compile
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from app.configs import PASSWORD_MIN_LENGTH
from app.utils.helpers import as_utc

EMAIL_PATTERN = re_compile(r"^\S+@\S+\.\S+$")


def normalize_email(value: str) -> str:
    """Strip and lower-case an email address."""
    return value.strip().lower()


class SignupRequest(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(
        ...,
        alias="firstName",
        min_length=1,
        max_length=100,
        description="User first name",
        examples=["Ada"],
    )
    last_name: str = Field(
        ...,
        alias="lastName",
        min_length=1,
        max_length=100,
        description="User last name",
        examples=["Lovelace"],
    )
    email: str = Field(
        ...,
        max_length=255,
        description="Email address",
        examples=["ada@example.com"],
    )
    password: SecretStr = Field(
        ...,
        description=f"Password (min {PASSWORD_MIN_LENGTH} characters)",
        examples=["s3cret!"],
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize the email and check its basic shape."""
        email = normalize_email(v)
        if not EMAIL_PATTERN.match(email):
            mssg = "Please provide a valid email"
            raise ValueError(mssg)
        return email

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr) -> SecretStr:
        """Enforce the minimum password length."""
        if len(v.get_secret_value()) < PASSWORD_MIN_LENGTH:
            mssg = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            raise ValueError(mssg)
        return v


class LoginRequest(BaseModel):
    """Login payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, examples=["ada@example.com"])
    password: SecretStr = Field(..., examples=["s3cret!"])

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def require_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            mssg = "Email and password are required"
            raise ValueError(mssg)
        return v


class AuthorResponse(BaseModel):
    """Author information embedded in blog responses."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str


class UserResponse(AuthorResponse):
    """Public view of a user. Never carries the password hash."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "createdAt": "2025-01-01T10:00:00Z",
            },
        },
    )

    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)
