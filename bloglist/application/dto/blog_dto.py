from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt

from ...domain.models.blog import BlogEntry


class BlogCreateRequest(BaseModel):
    """
    DTO for blog creation request

    Required-field rules live in the domain so every caller gets the same
    ValidationError; identifier fields such as ``id``, ``_id`` or ``__v`` are
    not declared and are dropped on parse.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[StrictInt] = None


class BlogUpdateRequest(BaseModel):
    """DTO for partial blog update; only fields the client sent are applied"""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[StrictInt] = None


class OwnerSummaryResponse(BaseModel):
    """DTO for the user a blog points at"""
    id: str
    username: str
    name: Optional[str] = None


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int
    owner: Optional[OwnerSummaryResponse] = None

    @classmethod
    def from_entry(cls, entry: BlogEntry) -> "BlogResponse":
        owner = None
        if entry.owner_profile is not None:
            owner = OwnerSummaryResponse(
                id=entry.owner_profile.id,
                username=entry.owner_profile.username,
                name=entry.owner_profile.name,
            )
        return cls(
            id=entry.id or "",
            title=entry.title,
            author=entry.author,
            url=entry.url,
            likes=entry.likes,
            owner=owner,
        )
