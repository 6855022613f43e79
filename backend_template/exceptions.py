"""Custom exceptions for the backend template.

Every error raised on purpose by the application derives from BackendError.
Each class carries the HTTP status it maps to, so the error handlers in
main.py can render them without a lookup table.
"""


class BackendError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BackendError):
    """Request data failed schema validation."""

    status_code = 400


class AuthenticationError(BackendError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class InvalidToken(AuthenticationError):
    """Bearer token failed signature, structure or expiry checks."""


class ResourceNotFound(BackendError):
    """No record exists for the requested id."""

    status_code = 404


class ConflictError(BackendError):
    """Write would violate a uniqueness constraint."""

    status_code = 409


class DatabaseError(BackendError):
    """Unexpected failure reported by the document store."""

    status_code = 500
