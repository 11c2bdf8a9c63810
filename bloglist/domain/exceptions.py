"""
Error taxonomy for the blog list core.

Repositories and use cases raise these; the API layer maps each kind to a
status code. Storage details live in ``details`` and in the logs, never in
``message``.
"""

# Standard library imports
from typing import Any, Dict, Optional


class BlogListError(Exception):
    """Base exception for all blog list errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BlogListError):
    """Raised when input breaks a field rule or a uniqueness rule."""
    pass


class NotFoundError(BlogListError):
    """Raised when an operation references a nonexistent identifier."""
    pass


class AuthenticationError(BlogListError):
    """Raised when credentials or an access token are rejected."""
    pass


class StoreError(BlogListError):
    """Raised when the document store is unreachable or rejects an operation."""
    pass


class DuplicateKeyError(StoreError):
    """Raised by the store when an insert violates a unique index."""

    def __init__(self, collection: str, key: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Unique index violation in '{collection}'",
            details={"collection": collection, "key": key or {}},
        )
        self.collection = collection
        self.key = key or {}
