"""Authentication service: password hashing, registration and login.

Password hashing uses bcrypt with a random salt per call. The AuthService
composes the user repository, the password hasher and the token service to
implement the two auth flows. Both flows finish in a single pass; nothing
is stored between calls.
"""

import logging

import bcrypt

from ..config import Settings
from ..db.user import UserRepository
from ..exceptions import AuthenticationError, ConflictError
from . import token
from .schemas import RegisterResponse, TokenResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password"


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt work factor

    Returns:
        bcrypt hash string (60 characters, salt embedded)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a password against a bcrypt hash.

    Returns False for a malformed hash instead of raising.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


# ============================================================================
# Auth Flows
# ============================================================================


class AuthService:
    """Register and login flows over the user repository."""

    def __init__(self, users: UserRepository, settings: Settings):
        self._users = users
        self._settings = settings

    def hash_password(self, password: str) -> str:
        """Hash with the configured work factor."""
        return hash_password(password, rounds=self._settings.bcrypt_work_factor)

    def register(self, data: UserCreate) -> RegisterResponse:
        """
        Create a new user account.

        Raises:
            ConflictError: If the email is already registered
        """
        if self._users.find_by_email(data.email) is not None:
            logger.warning(f"Registration rejected, email exists: {data.email}")
            raise ConflictError("User already exists", {"email": data.email})

        try:
            user = self._users.create({
                "name": data.name,
                "email": data.email,
                "password_hash": self.hash_password(data.password),
            })
        except ConflictError:
            # Lost a race with a concurrent signup on the unique email index
            logger.warning(f"Registration rejected, email exists: {data.email}")
            raise ConflictError("User already exists", {"email": data.email}) from None
        logger.info(f"User registered: {user.id}")

        return RegisterResponse(id=user.id, name=user.name, email=user.email)

    def login(self, data: UserLogin) -> TokenResponse:
        """
        Verify credentials and issue an access token.

        Raises:
            AuthenticationError: If the email is unknown or the password is
                wrong. Both cases carry the same message.
        """
        user = self._users.find_by_email(data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            logger.warning(f"Failed login attempt for email: {data.email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        expires_in = self._settings.jwt_expiry_seconds
        access_token = token.generate_access_token(
            user.id,
            user.email,
            self._settings.jwt_secret_key,
            expiry_seconds=expires_in,
        )
        logger.info(f"Successful login: {user.id}")

        return TokenResponse(token=access_token, expires_in=expires_in)
