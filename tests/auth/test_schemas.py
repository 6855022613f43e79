"""Tests for authentication and user schemas."""

import pytest
from pydantic import ValidationError

from backend_template.auth.schemas import (
    RegisterResponse,
    TokenPayload,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)


class TestUserCreate:
    """Tests for UserCreate."""

    def test_valid(self):
        user = UserCreate(name="Ada", email="ada@example.com", password="secret1")
        assert user.email == "ada@example.com"

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            UserCreate(name="A", email="ada@example.com", password="secret1")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Ada", email="not-an-email", password="secret1")

    def test_password_too_short(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Ada", email="ada@example.com", password="12345")

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate()
        assert {err["loc"][0] for err in exc_info.value.errors()} == {"name", "email", "password"}

    def test_password_longer_than_72_bytes(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(name="Ada", email="ada@example.com", password="a" * 73)
        assert exc_info.value.errors()[0]["loc"] == ("password",)

    def test_password_of_72_bytes_accepted(self):
        user = UserCreate(name="Ada", email="ada@example.com", password="a" * 72)
        assert len(user.password) == 72

    def test_multibyte_password_measured_in_bytes(self):
        """36 two-byte characters fit, 37 do not."""
        UserCreate(name="Ada", email="ada@example.com", password="\u00e9" * 36)
        with pytest.raises(ValidationError):
            UserCreate(name="Ada", email="ada@example.com", password="\u00e9" * 37)


class TestUserUpdate:
    """Tests for UserUpdate (all fields optional)."""

    def test_empty_update_is_valid(self):
        assert UserUpdate().model_dump(exclude_unset=True) == {}

    def test_only_set_fields_dumped(self):
        update = UserUpdate(name="Grace")
        assert update.model_dump(exclude_unset=True) == {"name": "Grace"}

    def test_provided_fields_still_validated(self):
        with pytest.raises(ValidationError):
            UserUpdate(password="123")
        with pytest.raises(ValidationError):
            UserUpdate(email="nope")

    def test_password_longer_than_72_bytes(self):
        with pytest.raises(ValidationError):
            UserUpdate(password="a" * 73)


class TestUserLogin:
    """Tests for UserLogin."""

    def test_valid(self):
        assert UserLogin(email="ada@example.com", password="secret1").password == "secret1"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserLogin(email="ada", password="secret1")

    def test_password_longer_than_72_bytes(self):
        with pytest.raises(ValidationError):
            UserLogin(email="ada@example.com", password="a" * 73)


class TestResponseSchemas:
    """Response schemas serialize with camelCase keys."""

    def test_user_response_aliases(self):
        user = UserResponse(
            id="1", name="Ada", email="ada@example.com",
            created_at="2025-01-01T00:00:00Z", updated_at="2025-01-02T00:00:00Z",
        )
        dumped = user.model_dump(by_alias=True)

        assert dumped["createdAt"] == "2025-01-01T00:00:00Z"
        assert dumped["updatedAt"] == "2025-01-02T00:00:00Z"
        assert "password_hash" not in dumped

    def test_user_response_has_no_password_field(self):
        assert "password_hash" not in UserResponse.model_fields
        assert "password" not in UserResponse.model_fields

    def test_register_response_fields(self):
        assert set(RegisterResponse.model_fields) == {"id", "name", "email"}

    def test_token_response_alias(self):
        dumped = TokenResponse(token="t", expires_in=3600).model_dump(by_alias=True)
        assert dumped == {"token": "t", "expiresIn": 3600}

    def test_token_payload(self):
        payload = TokenPayload(sub="1", email="ada@example.com", iat=1, exp=3601)
        assert payload.exp - payload.iat == 3600
