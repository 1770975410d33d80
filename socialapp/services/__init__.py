"""Services package for the social API."""

from .cache import PageCache, get_page_cache
from .post_service import PostService

__all__ = [
    "PageCache",
    "get_page_cache",
    "PostService",
]
