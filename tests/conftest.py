"""Shared test fixtures for the backend template."""

import mongomock
import pytest

from backend_template.auth import token as auth_token
from backend_template.auth.schemas import UserCreate
from backend_template.auth.service import AuthService
from backend_template.config import Settings
from backend_template.db import DB_KEY
from backend_template.main import create_app

TEST_SECRET = "test-secret-key"
TEST_PASSWORD = "TestPass123"


@pytest.fixture
def settings():
    """Settings for tests: fast bcrypt, fixed secret, isolated database."""
    return Settings(
        _env_file=None,
        environment="test",
        mongo_db_name="backend_template_test",
        jwt_secret_key=TEST_SECRET,
        bcrypt_work_factor=4,
    )


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def app(settings, mongo_client):
    """Create a fresh app per test with its own in-memory database."""
    app = create_app(settings, mongo_client=mongo_client)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def db(app):
    """The Database attached to the test app."""
    return app.extensions[DB_KEY]


@pytest.fixture
def auth_service(db, settings):
    return AuthService(db.users, settings)


@pytest.fixture
def test_user(auth_service):
    """Register a test user.

    Returns a tuple of (RegisterResponse, password).
    """
    data = UserCreate(name="Test User", email="test@example.com", password=TEST_PASSWORD)
    return auth_service.register(data), TEST_PASSWORD


@pytest.fixture
def jwt_token(test_user):
    """Generate a JWT token for the test user."""
    user, _password = test_user
    return auth_token.generate_access_token(user.id, user.email, TEST_SECRET)


@pytest.fixture
def auth_headers(jwt_token):
    """Authorization header with the test user's token."""
    return {"Authorization": f"Bearer {jwt_token}"}
