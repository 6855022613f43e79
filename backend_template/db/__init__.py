"""Database module for the backend template.

This module provides the Database API over MongoDB. Database wraps one
pymongo database handle and gives access to typed repositories.

ARCHITECTURE:
- Database owns no global state; create_app() builds the MongoClient and
  attaches one Database to the Flask app
- Request handlers reach it through get_db()
- Each entity type gets a typed repository built on Repository[T]
"""

import logging
from typing import TYPE_CHECKING

from flask import current_app
from pymongo import MongoClient

from ..config import Settings

if TYPE_CHECKING:
    from .user import UserRepository

logger = logging.getLogger(__name__)

DB_KEY = "backend_template.db"


class Database:
    """MongoDB database with typed repositories."""

    def __init__(self, client: MongoClient, db_name: str):
        """Initialize Database.

        Args:
            client: pymongo (or API-compatible) client
            db_name: Name of the database holding the collections
        """
        self._client = client
        self._db = client[db_name]
        self._users = None

    @property
    def users(self) -> "UserRepository":
        """User operations.

        Lazy-loaded and cached on first access.
        """
        if self._users is None:
            from .user import UserRepository
            self._users = UserRepository(self._db[UserRepository.collection_name])
        return self._users

    def init_db(self) -> None:
        """Create indexes. Safe to call on every startup."""
        self.users.ensure_indexes()
        logger.info(f"Database '{self._db.name}' initialized")

    def close(self) -> None:
        self._client.close()


def create_client(settings: Settings) -> MongoClient:
    """Create a MongoClient from settings.

    The client connects lazily; the first operation performs server selection.
    """
    return MongoClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )


def get_db() -> Database:
    """Return the Database attached to the current Flask app."""
    return current_app.extensions[DB_KEY]
