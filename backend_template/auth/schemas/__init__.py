"""Authentication Pydantic schemas for API validation."""

from .auth import (
    RegisterResponse,
    TokenPayload,
    TokenResponse,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserLogin",
    "UserResponse",
    "RegisterResponse",
    "TokenPayload",
    "TokenResponse",
]
