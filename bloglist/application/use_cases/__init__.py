from .auth import (
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .blog import (
    ListBlogsUseCase,
    CreateBlogUseCase,
    GetBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
)
from .user import (
    ListUsersUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListBlogsUseCase",
    "CreateBlogUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "ListUsersUseCase",
    "RegisterUserUseCase",
]
