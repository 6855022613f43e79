"""Generic resource access over a MongoDB collection.

Repository[T] gives every resource the same find-all / find-by-id / create /
update / delete contract. It is built by composition: a pymongo Collection
for storage and a pydantic model class that documents are validated into.
Typed repositories (see user.py) wrap one Repository per entity.

ID GENERATION POLICY:
The store layer assigns ids (UUID v4 strings) and the created_at/updated_at
timestamps. Callers never pass them; any such keys in the input are dropped.

CONSISTENCY:
Each operation is a single-document read or write, so MongoDB's per-document
atomicity is the only guarantee. Concurrent updates to the same record are
last-write-wins and nothing is retried.
"""

import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Mapping, TypeVar

from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..exceptions import ConflictError, DatabaseError
from ..utils import isodatetime, uid

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Keys owned by the store layer
_RESERVED_FIELDS = {"_id", "id", "created_at", "updated_at"}


@contextmanager
def _store_errors(collection_name: str) -> Iterator[None]:
    """Translate pymongo errors into application exceptions."""
    try:
        yield
    except DuplicateKeyError as e:
        key = e.details.get("keyValue") if e.details else None
        raise ConflictError(
            f"Duplicate key in '{collection_name}'",
            {"key": key} if key else {}
        )
    except PyMongoError as e:
        logger.error(f"[{collection_name}] Store operation failed: {e}")
        raise DatabaseError("Database operation failed", {"collection": collection_name})


class Repository(Generic[T]):
    """CRUD operations for one entity type stored in one collection."""

    def __init__(self, collection: Collection, model_cls: type[T]):
        """Initialize repository.

        Args:
            collection: pymongo collection holding the documents
            model_cls: pydantic model with an ``id`` field; documents are
                validated into it after ``_id`` is renamed to ``id``
        """
        self._collection = collection
        self._model_cls = model_cls
        self.name = collection.name

    def _log(self, message: str) -> None:
        logger.info(f"[{self.name}] {message}")

    def _to_model(self, document: Mapping[str, Any]) -> T:
        data = dict(document)
        data["id"] = data.pop("_id")
        return self._model_cls.model_validate(data)

    @staticmethod
    def _writable(data: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in data.items() if k not in _RESERVED_FIELDS}

    def find_all(self) -> list[T]:
        """Return every record in the collection."""
        self._log("Fetching all records")
        with _store_errors(self.name):
            return [self._to_model(doc) for doc in self._collection.find()]

    def find_by_id(self, entity_id: str) -> T | None:
        """Return the record with this id, or None."""
        self._log(f"Fetching record with id={entity_id}")
        with _store_errors(self.name):
            document = self._collection.find_one({"_id": entity_id})
        return self._to_model(document) if document else None

    def find_one(self, query: Mapping[str, Any]) -> T | None:
        """Return the first record matching ``query``, or None."""
        with _store_errors(self.name):
            document = self._collection.find_one(dict(query))
        return self._to_model(document) if document else None

    def count(self) -> int:
        with _store_errors(self.name):
            return self._collection.count_documents({})

    def create(self, data: Mapping[str, Any]) -> T:
        """Persist a new record and return it.

        Raises:
            ConflictError: If a unique index rejects the document
            DatabaseError: On any other store failure
        """
        self._log("Creating new record")
        now = isodatetime.now()
        document = {
            "_id": uid.generate_uuid(),
            **self._writable(data),
            "created_at": now,
            "updated_at": now,
        }
        with _store_errors(self.name):
            self._collection.insert_one(document)
        return self._to_model(document)

    def update(self, entity_id: str, data: Mapping[str, Any]) -> T | None:
        """Merge ``data`` onto an existing record.

        Only the supplied fields change; updated_at is always refreshed.

        Returns:
            The updated record, or None if no record has this id
        """
        self._log(f"Updating record with id={entity_id}")
        changes = {**self._writable(data), "updated_at": isodatetime.now()}
        with _store_errors(self.name):
            document = self._collection.find_one_and_update(
                {"_id": entity_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        return self._to_model(document) if document else None

    def delete(self, entity_id: str) -> None:
        """Delete a record. Deleting a missing id is not an error."""
        self._log(f"Deleting record with id={entity_id}")
        with _store_errors(self.name):
            self._collection.delete_one({"_id": entity_id})
