"""Constants for domain model field and collection names"""

from .blog_fields import BlogFields
from .user_fields import UserFields
from .collection_names import Collections

__all__ = [
    "BlogFields",
    "UserFields",
    "Collections",
]
