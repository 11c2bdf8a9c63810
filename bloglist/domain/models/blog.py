# Standard library imports
from dataclasses import dataclass, field
from typing import Optional

# Local application imports
from ..exceptions import ValidationError


@dataclass
class OwnerSummary:
    """Minimal display data of the user a blog entry points at"""
    id: str
    username: str
    name: Optional[str] = None


@dataclass
class BlogEntry:
    """
    Pure domain model for a blog entry.

    ``owner`` is a weak reference: the owning user's id and nothing more.
    ``owner_profile`` is filled in on reads when that user still exists and is
    never persisted.
    """
    id: Optional[str]
    title: str
    url: str
    author: Optional[str] = None
    likes: int = 0
    owner: Optional[str] = None
    owner_profile: Optional[OwnerSummary] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("Blog title is required", details={"field": "title"})
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValidationError("Blog url is required", details={"field": "url"})
        if self.author is not None and not isinstance(self.author, str):
            raise ValidationError("Blog author must be a string", details={"field": "author"})
        # bool is an int subclass; a flag is not a like count
        if isinstance(self.likes, bool) or not isinstance(self.likes, int):
            raise ValidationError("Blog likes must be an integer", details={"field": "likes"})
        if self.likes < 0:
            raise ValidationError("Blog likes must not be negative", details={"field": "likes"})
        if self.owner is not None and not isinstance(self.owner, str):
            raise ValidationError("Blog owner must be a user id", details={"field": "owner"})
