from .list_helper import total_likes

__all__ = ["total_likes"]
