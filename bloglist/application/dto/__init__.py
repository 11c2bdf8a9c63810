from .auth_dto import UserLoginRequest, TokenResponse
from .blog_dto import BlogCreateRequest, BlogUpdateRequest, BlogResponse, OwnerSummaryResponse
from .user_dto import UserRegistrationRequest, UserResponse, BlogSummaryResponse

__all__ = [
    "UserLoginRequest",
    "TokenResponse",
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogResponse",
    "OwnerSummaryResponse",
    "UserRegistrationRequest",
    "UserResponse",
    "BlogSummaryResponse",
]
