"""Authentication module for the backend template.

This module provides:
- Schema validation for auth operations
- JWT token generation and validation
- Password hashing and the register/login flows
- The @auth_required request gate for protected endpoints

Auth endpoints:
- POST /api/auth/signup - Register a new user
- POST /api/auth/login  - Authenticate and return a JWT token
"""

from . import schemas, token

__all__ = ["schemas", "token"]
