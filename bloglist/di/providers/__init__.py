from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .blog_provider import BlogProvider
from .user_provider import UserProvider
from .auth_provider import AuthProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "BlogProvider",
    "UserProvider",
    "AuthProvider",
]
