# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional

# Local application imports
from ..constants import UserFields
from ..exceptions import ValidationError


@dataclass
class BlogSummary:
    """Read-only view of a blog owned by a user"""
    id: str
    title: str
    url: str
    author: Optional[str] = None
    likes: int = 0


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    password_hash: str
    name: Optional[str] = None
    blogs: List[BlogSummary] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.username, str) or len(self.username) < UserFields.USERNAME_MIN_LENGTH:
            raise ValidationError(
                f"Username must be at least {UserFields.USERNAME_MIN_LENGTH} characters",
                details={"field": UserFields.USERNAME},
            )
        if not self.password_hash:
            raise ValidationError("Password hash is required", details={"field": UserFields.PASSWORD_HASH})
