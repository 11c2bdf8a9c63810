from .blog import BlogEntry, OwnerSummary
from .user import User, BlogSummary

__all__ = ["BlogEntry", "OwnerSummary", "User", "BlogSummary"]
