"""Tests for the signup, login and user response schemas."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.models import UserDB
from app.schemas import LoginRequest, SignupRequest, UserResponse


def signup_payload(**overrides: object) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "password": "secret1",
    }
    payload.update(overrides)
    return payload


class TestSignupRequest:
    """Test cases for SignupRequest."""

    def test_valid(self) -> None:
        request = SignupRequest.model_validate(signup_payload())
        assert request.first_name == "Ada"
        assert request.password.get_secret_value() == "secret1"

    def test_email_normalized(self) -> None:
        request = SignupRequest.model_validate(signup_payload(email="  Ada@Example.COM "))
        assert request.email == "ada@example.com"

    def test_names_stripped(self) -> None:
        request = SignupRequest.model_validate(signup_payload(firstName="  Ada  "))
        assert request.first_name == "Ada"

    @pytest.mark.parametrize("email", ["ada", "ada@", "ada@example", "a da@example.com"])
    def test_invalid_email(self, email: str) -> None:
        with pytest.raises(ValidationError, match="Please provide a valid email"):
            SignupRequest.model_validate(signup_payload(email=email))

    def test_short_password(self) -> None:
        with pytest.raises(ValidationError, match="Password must be at least 6 characters"):
            SignupRequest.model_validate(signup_payload(password="12345"))

    @pytest.mark.parametrize("field", ["firstName", "lastName", "email", "password"])
    def test_required_fields(self, field: str) -> None:
        payload = signup_payload()
        del payload[field]
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(payload)

    def test_password_hidden_in_repr(self) -> None:
        request = SignupRequest.model_validate(signup_payload())
        assert "secret1" not in repr(request)


class TestLoginRequest:
    """Test cases for LoginRequest."""

    def test_email_lowercased(self) -> None:
        request = LoginRequest.model_validate({"email": "ADA@example.com", "password": "x"})
        assert request.email == "ada@example.com"

    def test_empty_password(self) -> None:
        with pytest.raises(ValidationError, match="Email and password are required"):
            LoginRequest.model_validate({"email": "ada@example.com", "password": ""})

    def test_empty_email(self) -> None:
        with pytest.raises(ValidationError):
            LoginRequest.model_validate({"email": "", "password": "secret1"})


class TestUserResponse:
    """Test cases for UserResponse."""

    def test_from_orm_row(self) -> None:
        user = UserDB(
            id=uuid4(),
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            password_hash="$argon2id$hash",
            created_at=datetime(2025, 1, 1),  # noqa: DTZ001
        )

        dumped = UserResponse.model_validate(user).model_dump(by_alias=True)

        assert set(dumped) == {"id", "firstName", "lastName", "email", "createdAt"}
        assert dumped["createdAt"].tzinfo is UTC
