"""User CRUD endpoints.

This module implements RESTful endpoints for user management:
- GET    /api/users          - List users
- POST   /api/users          - Create user
- GET    /api/users/<id>     - Get single user
- PUT    /api/users/<id>     - Update user (partial)
- DELETE /api/users/<id>     - Delete user (idempotent)

All endpoints require a bearer token.
"""

from flask import Blueprint

from ..api.responses import send_response
from ..api.validation import validate_request
from ..auth.decorators import auth_required
from ..auth.schemas import UserCreate, UserUpdate
from ..auth.service import AuthService
from ..config import get_settings
from ..db import get_db
from .service import UserService

users_bp = Blueprint("users", __name__)


def _service() -> UserService:
    db = get_db()
    return UserService(db.users, AuthService(db.users, get_settings()))


@users_bp.get("")
@auth_required
def list_users():
    """
    List all users.

    Returns:
        200: Array of user profiles
    """
    users = _service().list_users()
    return send_response(users, "Users fetched successfully")


@users_bp.post("")
@auth_required
@validate_request
def create_user(data: UserCreate):
    """
    Create a user.

    Request Body (UserCreate):
        - name: str (min 2 characters)
        - email: str (valid email)
        - password: str (min 6 characters)

    Returns:
        201: Created user profile
        400: Validation error
        409: Email already registered
    """
    user = _service().create_user(data)
    return send_response(user, "User created successfully", 201)


@users_bp.get("/<user_id>")
@auth_required
def get_user(user_id: str):
    """
    Get a single user by ID.

    Returns:
        200: User profile
        404: User not found
    """
    user = _service().get_user(user_id)
    return send_response(user, "User fetched successfully")


@users_bp.put("/<user_id>")
@auth_required
@validate_request
def update_user(user_id: str, data: UserUpdate):
    """
    Update a user.

    Only provided fields are updated (partial update). A new password is
    hashed before it is stored.

    Returns:
        200: Updated user profile
        400: Validation error
        404: User not found
        409: Email already in use
    """
    user = _service().update_user(user_id, data)
    return send_response(user, "User updated successfully")


@users_bp.delete("/<user_id>")
@auth_required
def delete_user(user_id: str):
    """
    Delete a user.

    Returns:
        200: Deleted (also when the user did not exist)
    """
    _service().delete_user(user_id)
    return send_response(None, "User deleted successfully")
