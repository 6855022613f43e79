"""Tests for UserService."""

import pytest

from backend_template.auth.schemas import UserCreate, UserUpdate
from backend_template.auth.service import verify_password
from backend_template.exceptions import ConflictError, ResourceNotFound
from backend_template.users.service import UserService


@pytest.fixture
def user_service(db, auth_service):
    return UserService(db.users, auth_service)


@pytest.fixture
def ada(user_service):
    return user_service.create_user(
        UserCreate(name="Ada", email="ada@example.com", password="SecurePass123")
    )


class TestCreateAndRead:
    """Tests for create_user, get_user and list_users."""

    def test_create_returns_full_profile(self, ada):
        assert ada.name == "Ada"
        assert ada.created_at and ada.updated_at
        assert "password_hash" not in ada.model_dump()

    def test_create_hashes_password(self, ada, db):
        stored = db.users.find_by_id(ada.id)
        assert verify_password("SecurePass123", stored.password_hash)

    def test_create_duplicate_email(self, ada, user_service):
        with pytest.raises(ConflictError):
            user_service.create_user(
                UserCreate(name="Other", email="ada@example.com", password="SecurePass123")
            )

    def test_get_user(self, ada, user_service):
        assert user_service.get_user(ada.id) == ada

    def test_get_missing_user(self, user_service):
        with pytest.raises(ResourceNotFound):
            user_service.get_user("missing")

    def test_list_users(self, ada, user_service):
        assert user_service.list_users() == [ada]


class TestUpdate:
    """Tests for update_user."""

    def test_update_single_field(self, ada, user_service, db):
        before = db.users.find_by_id(ada.id)

        updated = user_service.update_user(ada.id, UserUpdate(name="Ada Lovelace"))
        after = db.users.find_by_id(ada.id)

        assert updated.name == "Ada Lovelace"
        assert after.name == "Ada Lovelace"
        assert after.email == before.email
        assert after.password_hash == before.password_hash
        assert after.created_at == before.created_at

    def test_update_password_is_hashed(self, ada, user_service, db):
        user_service.update_user(ada.id, UserUpdate(password="NewPass789"))
        stored = db.users.find_by_id(ada.id)

        assert stored.password_hash != "NewPass789"
        assert verify_password("NewPass789", stored.password_hash)
        assert not verify_password("SecurePass123", stored.password_hash)

    def test_update_email_to_taken_email(self, ada, user_service):
        grace = user_service.create_user(
            UserCreate(name="Grace", email="grace@example.com", password="SecurePass123")
        )
        with pytest.raises(ConflictError):
            user_service.update_user(grace.id, UserUpdate(email="ada@example.com"))

    def test_update_email_to_own_email(self, ada, user_service):
        updated = user_service.update_user(ada.id, UserUpdate(email="ada@example.com"))
        assert updated.email == "ada@example.com"

    def test_update_missing_user(self, user_service):
        with pytest.raises(ResourceNotFound):
            user_service.update_user("missing", UserUpdate(name="Nobody"))

    def test_update_missing_user_with_taken_email(self, ada, user_service):
        """A missing user is reported before any email conflict."""
        with pytest.raises(ResourceNotFound):
            user_service.update_user("missing", UserUpdate(email="ada@example.com"))


class TestDelete:
    """Tests for delete_user."""

    def test_delete_user(self, ada, user_service):
        user_service.delete_user(ada.id)
        with pytest.raises(ResourceNotFound):
            user_service.get_user(ada.id)

    def test_delete_missing_user(self, user_service):
        user_service.delete_user("missing")
