"""
Blog models for query parameters, pagination and query results.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import math

from post_service.models import Post, TagFilter


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 12
MAX_LIMIT = 100


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse an integer query value, falling back to ``default``.

    Values below 1 are clamped to 1.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return max(1, value)


@dataclass(frozen=True)
class QueryParams:
    """Validated blog query parameters."""

    tag: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    featured: bool = False

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be a positive integer, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit}")

    @classmethod
    def from_args(
        cls,
        args: Mapping[str, str],
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "QueryParams":
        """Build parameters from raw query-string arguments."""
        page = parse_positive_int(args.get("page"), DEFAULT_PAGE)
        limit = parse_positive_int(args.get("limit"), default_limit)
        return cls(
            tag=args.get("tag") or None,
            page=page,
            limit=max(1, min(limit, max_limit)),
            featured=args.get("featured") == "true",
        )


class Pagination:
    """Pagination data structure.

    The current page is kept as requested, even past the last page, in
    which case the page slice is simply empty.
    """

    def __init__(self, total_items: int, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_LIMIT):
        self.total_items = total_items
        self.page = max(1, page)
        self.per_page = max(1, per_page)
        # 0 pages for an empty result
        self.total_pages = math.ceil(total_items / self.per_page)

        self.start = (self.page - 1) * self.per_page
        self.end = self.start + self.per_page

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def get_page_items(self, items: List[Any]) -> List[Any]:
        """Get items for current page."""
        return list(items[self.start:self.end])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "currentPage": self.page,
            "totalPages": self.total_pages,
            "totalPosts": self.total_items,
            "hasNextPage": self.has_next,
            "hasPrevPage": self.has_prev,
            "limit": self.per_page,
        }


@dataclass
class QueryResult:
    """Result of a blog post query."""

    posts: List[Post]
    pagination: Pagination
    tag_filters: List[TagFilter] = field(default_factory=list)
    featured: List[Post] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON response body."""
        return {
            "posts": [post.to_dict() for post in self.posts],
            "pagination": self.pagination.to_dict(),
            "tagFilters": [tag_filter.to_dict() for tag_filter in self.tag_filters],
            "featured": [post.to_dict() for post in self.featured],
        }
