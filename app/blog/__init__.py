"""
Blog module: post query API and the blog page.
"""

from .models import QueryParams, Pagination, QueryResult
from .services import PostFilter, PostQueryService, PostRenderer
from .factory import create_blog_module

__all__ = [
    "QueryParams",
    "Pagination",
    "QueryResult",
    "PostFilter",
    "PostQueryService",
    "PostRenderer",
    "create_blog_module",
]
