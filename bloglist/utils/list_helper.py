"""Aggregates over lists of blogs."""

# Standard library imports
from typing import Any, Iterable, Mapping, Union

# Local application imports
from ..application.dto.blog_dto import BlogResponse
from ..domain.models.blog import BlogEntry


def total_likes(blogs: Iterable[Union[BlogEntry, BlogResponse, Mapping[str, Any]]]) -> int:
    """
    Sum the likes of a list of blogs

    Args:
        blogs: Blog entries, blog responses or plain blog dicts

    Returns:
        Total likes; 0 for an empty list
    """
    total = 0
    for blog in blogs:
        if isinstance(blog, Mapping):
            total += blog.get("likes") or 0
        else:
            total += blog.likes
    return total
