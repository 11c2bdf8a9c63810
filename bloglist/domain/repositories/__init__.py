from .document_store import DocumentStore
from .blog_repository import BlogRepository
from .user_registry import UserRegistry

__all__ = ["DocumentStore", "BlogRepository", "UserRegistry"]
