"""Pydantic schemas for authentication and user management.

Request schemas validate incoming JSON. Response schemas serialize with
camelCase keys (createdAt, expiresIn) to keep the public wire format.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


def check_password_length(value: str | None) -> str | None:
    """Reject passwords that bcrypt cannot hash."""
    if value is not None and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class CamelModel(BaseModel):
    """Base for response schemas: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# User Schemas
# ============================================================================


class UserBase(BaseModel):
    """Fields shared by user creation and registration."""

    name: str = Field(..., min_length=2, description="Display name")
    email: EmailStr = Field(..., description="Unique email address")


class UserCreate(UserBase):
    """Schema for signup and user creation."""

    password: str = Field(..., min_length=6, description="Plain text password (will be hashed)")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class UserUpdate(BaseModel):
    """Schema for partial user updates. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class UserLogin(BaseModel):
    """Schema for login request payload."""

    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class UserResponse(CamelModel):
    """Public user profile (password hash excluded)."""

    id: str
    name: str
    email: str
    created_at: str
    updated_at: str


class RegisterResponse(CamelModel):
    """Profile returned by signup."""

    id: str
    name: str
    email: str


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str = Field(..., description="User ID")
    email: str
    iat: int = Field(..., description="Issued at (Unix seconds)")
    exp: int = Field(..., description="Expires at (Unix seconds)")


class TokenResponse(CamelModel):
    """Login response."""

    token: str
    expires_in: int = Field(..., description="Token lifetime in seconds")
