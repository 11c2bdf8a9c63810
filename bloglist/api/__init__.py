"""
API layer for the Blog List backend.

Exposes HTTP endpoints under /api (blogs, users, login).
"""
from .blog_controller import router as blog_router
from .user_controller import router as user_router
from .auth_controller import router as auth_router


__all__ = ["blog_router", "user_router", "auth_router"]
