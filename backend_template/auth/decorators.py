"""Authentication decorator for protected endpoints.

@auth_required is the request gate: it checks the bearer token before the
view runs and makes the caller's identity available through flask.g. It
performs no role or ownership checks.
"""

import logging
from functools import wraps

from flask import g, request

from ..config import get_settings
from ..exceptions import AuthenticationError, InvalidToken
from . import token

logger = logging.getLogger(__name__)

EXPECTED_HEADER = "Authorization: Bearer <token>"


def _extract_bearer_token() -> str:
    """Return the token from the Authorization header.

    Raises:
        AuthenticationError: If the header is absent or not a Bearer header
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise AuthenticationError(
            "Unauthorized: No token provided",
            {"code": "missing_auth", "expected": EXPECTED_HEADER}
        )

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise AuthenticationError(
            "Unauthorized: No token provided",
            {"code": "invalid_header", "expected": EXPECTED_HEADER}
        )

    return parts[1]


def _authenticate_request() -> None:
    """
    Validate the bearer token of the current request.

    Stores authenticated user information in flask.g:
    - g.user_id: User ID (token ``sub``)
    - g.email: Email from the token
    - g.token_payload: Full TokenPayload

    Raises:
        AuthenticationError: If no valid token is provided
    """
    jwt_token = _extract_bearer_token()
    settings = get_settings()

    try:
        payload = token.validate_access_token(jwt_token, settings.jwt_secret_key)
    except InvalidToken as e:
        logger.warning(f"Rejected token on {request.path}: {e.message}")
        raise AuthenticationError("Unauthorized: Invalid token", e.details)

    g.user_id = payload.sub
    g.email = payload.email
    g.token_payload = payload
    logger.debug(f"Authenticated user {payload.sub}")


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @users_bp.get("")
    @auth_required
    def list_users():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
