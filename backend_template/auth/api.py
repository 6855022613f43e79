"""Authentication API endpoints.

- POST /api/auth/signup - Register a new user
- POST /api/auth/login  - Authenticate and return a JWT token

Both endpoints are public and return the standard response envelope.
"""

from flask import Blueprint

from ..api.responses import send_response
from ..api.validation import validate_request
from ..config import get_settings
from ..db import get_db
from .schemas import UserCreate, UserLogin
from .service import AuthService

auth_bp = Blueprint("auth", __name__)


def _service() -> AuthService:
    return AuthService(get_db().users, get_settings())


@auth_bp.post("/signup")
@validate_request
def signup(data: UserCreate):
    """
    Register a new user.

    Example request:
    ```json
    {"name": "Ada", "email": "ada@example.com", "password": "secret123"}
    ```

    Example response (201):
    ```json
    {
        "success": true,
        "message": "Registration successful",
        "data": {"id": "550e8400-...", "name": "Ada", "email": "ada@example.com"}
    }
    ```

    Raises:
        ValidationError: If request data is invalid
        ConflictError: If the email is already registered
    """
    user = _service().register(data)
    return send_response(user, "Registration successful", 201)


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate a user and return a JWT token.

    Example response (200):
    ```json
    {
        "success": true,
        "message": "Login successful",
        "data": {"token": "eyJhbGciOi...", "expiresIn": 3600}
    }
    ```

    Raises:
        AuthenticationError: If the email is unknown or the password is wrong
    """
    result = _service().login(data)
    return send_response(result, "Login successful")
