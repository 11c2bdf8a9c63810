from typing import List, Optional

from pydantic import BaseModel

from ...domain.models.user import User


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request; length rules are enforced by the registry"""
    username: str
    name: Optional[str] = None
    password: str


class BlogSummaryResponse(BaseModel):
    """DTO for a blog listed under its owner"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    name: Optional[str] = None
    blogs: List[BlogSummaryResponse] = []

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            username=user.username,
            name=user.name,
            blogs=[
                BlogSummaryResponse(
                    id=blog.id,
                    title=blog.title,
                    author=blog.author,
                    url=blog.url,
                    likes=blog.likes,
                )
                for blog in user.blogs
            ],
        )
