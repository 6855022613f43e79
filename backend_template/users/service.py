"""User management operations.

UserService sits between the /api/users endpoints and the user repository.
It turns repository results into public profiles and keeps the stored
password a bcrypt hash on both create and update.
"""

import logging

from ..auth.schemas import UserCreate, UserResponse, UserUpdate
from ..auth.service import AuthService
from ..db.user import UserRecord, UserRepository
from ..exceptions import ConflictError, ResourceNotFound

logger = logging.getLogger(__name__)


def to_user_response(user: UserRecord) -> UserResponse:
    """Public profile for a stored user (drops the password hash)."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class UserService:
    """CRUD operations on users returning public profiles."""

    def __init__(self, users: UserRepository, auth: AuthService):
        self._users = users
        self._auth = auth

    def list_users(self) -> list[UserResponse]:
        return [to_user_response(user) for user in self._users.find_all()]

    def get_user(self, user_id: str) -> UserResponse:
        """
        Raises:
            ResourceNotFound: If no user has this id
        """
        user = self._users.find_by_id(user_id)
        if user is None:
            raise ResourceNotFound("User not found", {"user_id": user_id})
        return to_user_response(user)

    def create_user(self, data: UserCreate) -> UserResponse:
        """Create a user, hashing the password.

        Raises:
            ConflictError: If the email is already registered
        """
        registered = self._auth.register(data)
        return self.get_user(registered.id)

    def update_user(self, user_id: str, data: UserUpdate) -> UserResponse:
        """
        Apply a partial update. Only fields present in the request change.

        Raises:
            ResourceNotFound: If no user has this id
            ConflictError: If the new email belongs to another user
        """
        if self._users.find_by_id(user_id) is None:
            raise ResourceNotFound("User not found", {"user_id": user_id})

        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        email = changes.get("email")
        if email is not None:
            existing = self._users.find_by_email(email)
            if existing is not None and existing.id != user_id:
                raise ConflictError("Email already in use", {"email": email})

        password = changes.pop("password", None)
        if password is not None:
            changes["password_hash"] = self._auth.hash_password(password)

        user = self._users.update(user_id, changes)
        if user is None:
            raise ResourceNotFound("User not found or not updated", {"user_id": user_id})

        logger.info(f"User updated: {user_id} ({', '.join(sorted(changes)) or 'no fields'})")
        return to_user_response(user)

    def delete_user(self, user_id: str) -> None:
        """Delete a user. Deleting a missing user is not an error."""
        self._users.delete(user_id)
        logger.info(f"User deleted: {user_id}")
