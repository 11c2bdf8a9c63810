"""
Unit tests for bloglist.utils.list_helper
"""
from bloglist.application.dto.blog_dto import BlogResponse
from bloglist.domain.models.blog import BlogEntry
from bloglist.utils.list_helper import total_likes


def test_empty_list_is_zero():
    assert total_likes([]) == 0


def test_single_blog_equals_its_likes():
    assert total_likes([{"title": "Go To", "url": "http://x", "likes": 5}]) == 5


def test_mixed_inputs_summed(initial_blogs):
    blogs = list(initial_blogs) + [
        BlogEntry(id="b1", title="T", url="http://t", likes=10),
        BlogResponse(id="b2", title="R", url="http://r", likes=1),
        {"title": "no likes field", "url": "http://n"},
    ]
    assert total_likes(blogs) == 7 + 5 + 10 + 1
