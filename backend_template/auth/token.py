"""JWT token service.

Tokens are HS256-signed JWTs carrying the user id (``sub``), ``email``,
``iat`` and ``exp``. They are stateless: validity depends only on the
signature, the expiry and the current time. Nothing is stored server-side,
so a token stays valid until it expires or the secret key changes.
"""

import logging
from datetime import datetime

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidToken
from ..utils import isodatetime
from .schemas import TokenPayload

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRY_SECONDS = 3600
REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


def generate_access_token(
    user_id: str,
    email: str,
    secret_key: str,
    expiry_seconds: int = DEFAULT_EXPIRY_SECONDS,
    issued_at: datetime | None = None,
) -> str:
    """
    Generate a signed access token.

    Args:
        user_id: ID of the authenticated user (stored as ``sub``)
        email: Email of the authenticated user
        secret_key: HMAC signing key
        expiry_seconds: Lifetime of the token from issuance
        issued_at: Issuance time, defaults to now

    Returns:
        Encoded JWT string
    """
    iat = isodatetime.to_unix(issued_at) if issued_at else isodatetime.now_unix()
    payload = {
        "sub": user_id,
        "email": email,
        "iat": iat,
        "exp": iat + expiry_seconds,
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def validate_access_token(token: str, secret_key: str) -> TokenPayload:
    """
    Validate a token and return its claims.

    Raises:
        InvalidToken: If the signature does not match, the token is
            malformed, a claim is missing, or the token has expired
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload.model_validate(payload)
    except jwt.ExpiredSignatureError:
        raise InvalidToken("Token has expired", {"code": "token_expired"})
    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        logger.debug(f"Token rejected: {e}")
        raise InvalidToken("Invalid token", {"code": "invalid_token"})


def decode_token_no_validation(token: str) -> dict:
    """Decode token claims without checking signature or expiry.

    For introspection only. Never use the result for authentication.
    """
    return jwt.decode(
        token,
        options={"verify_signature": False, "verify_exp": False},
        algorithms=[ALGORITHM],
    )


def get_token_expiry_remaining(token: str) -> int:
    """Seconds until the token expires (negative once expired)."""
    payload = decode_token_no_validation(token)
    return int(payload["exp"]) - isodatetime.now_unix()


def is_token_expired(token: str) -> bool:
    return get_token_expiry_remaining(token) <= 0
