"""User records and their typed repository.

IMPORT CONVENTION:
- Database exposes this through the db.users property
- NO direct import needed when using the Database API
"""

import logging
from typing import Any, Mapping

from pydantic import BaseModel
from pymongo import ASCENDING
from pymongo.collection import Collection

from .repository import Repository

logger = logging.getLogger(__name__)


class UserRecord(BaseModel):
    """A stored user. ``password_hash`` is never plaintext."""

    id: str
    name: str
    email: str
    password_hash: str
    created_at: str
    updated_at: str


class UserRepository:
    """Typed access to the users collection.

    Wraps a Repository[UserRecord] and adds lookups that only make sense
    for users.
    """

    collection_name = "users"

    def __init__(self, collection: Collection):
        self._collection = collection
        self._records: Repository[UserRecord] = Repository(collection, UserRecord)

    def ensure_indexes(self) -> None:
        """Create the unique email index and the created_at index."""
        self._collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        self._collection.create_index([("created_at", ASCENDING)], name="created_at")

    def find_all(self) -> list[UserRecord]:
        return self._records.find_all()

    def find_by_id(self, user_id: str) -> UserRecord | None:
        return self._records.find_by_id(user_id)

    def find_by_email(self, email: str) -> UserRecord | None:
        """Exact (case-sensitive) email lookup."""
        logger.info(f"[{self.collection_name}] Fetching user with email={email}")
        return self._records.find_one({"email": email})

    def create(self, data: Mapping[str, Any]) -> UserRecord:
        return self._records.create(data)

    def update(self, user_id: str, data: Mapping[str, Any]) -> UserRecord | None:
        return self._records.update(user_id, data)

    def delete(self, user_id: str) -> None:
        self._records.delete(user_id)

    def count(self) -> int:
        return self._records.count()
