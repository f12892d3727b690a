"""
Blog services for post filtering, querying and rendering.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import markdown

from post_service.catalog import ALL_TAGS_LABEL
from post_service.models import Post, TagFilter
from .models import Pagination, QueryParams, QueryResult

logger = logging.getLogger(__name__)


class PostFilter:
    """Service for filtering posts based on various criteria."""

    @staticmethod
    def filter_by_tag(posts: List[Post], tag: Optional[str]) -> List[Post]:
        """Filter posts by tag, ignoring case. ``All`` disables the filter."""
        if not tag or tag == ALL_TAGS_LABEL:
            return posts
        return [p for p in posts if p.has_tag(tag)]

    @staticmethod
    def filter_featured(posts: Iterable[Post]) -> List[Post]:
        """Keep featured posts only."""
        return [p for p in posts if p.featured]


class PostQueryService:
    """Answers blog queries over a fixed post collection."""

    def __init__(self, posts: Sequence[Post], tag_filters: Sequence[TagFilter]):
        """
        Initialize PostQueryService.

        Args:
            posts: Post collection in display order
            tag_filters: Tag filter catalog shown with every result
        """
        self._posts = tuple(posts)
        self._tag_filters = tuple(tag_filters)
        self._featured = tuple(PostFilter.filter_featured(self._posts))

    @property
    def posts(self) -> List[Post]:
        return list(self._posts)

    @property
    def tag_filters(self) -> List[TagFilter]:
        return list(self._tag_filters)

    def get_featured(self) -> List[Post]:
        """Featured posts from the whole collection."""
        return list(self._featured)

    def query(self, params: QueryParams) -> QueryResult:
        """Filter and paginate the collection."""
        posts = list(self._posts)
        posts = PostFilter.filter_by_tag(posts, params.tag)
        if params.featured:
            posts = PostFilter.filter_featured(posts)

        pagination = Pagination(len(posts), page=params.page, per_page=params.limit)
        logger.debug(
            f"Blog query tag={params.tag!r} featured={params.featured} "
            f"page={params.page} limit={params.limit} -> {pagination.total_items} posts"
        )
        return QueryResult(
            posts=pagination.get_page_items(posts),
            pagination=pagination,
            tag_filters=self.tag_filters,
            featured=self.get_featured(),
        )


class PostRenderer:
    """Service for rendering posts into template-ready dictionaries."""

    def render_markdown(self, md_text: str) -> str:
        """Convert Markdown → HTML."""
        return markdown.markdown(
            md_text,
            extensions=[
                "attr_list",
                "sane_lists",
            ],
        )

    def render_post(self, post: Post) -> Dict[str, Any]:
        """Materialize description_html for a single post."""
        item = post.to_dict()
        try:
            item["description_html"] = self.render_markdown(post.description)
        except Exception as e:
            logger.error(f"Error rendering description for post {post.id}: {e}")
            item["description_html"] = ""
        return item

    def render_posts(self, posts: Iterable[Post]) -> List[Dict[str, Any]]:
        return [self.render_post(post) for post in posts]

    @staticmethod
    def mark_active_filters(tag_filters: Iterable[TagFilter], selected_tag: Optional[str]) -> List[Dict[str, Any]]:
        """Attach the ``active`` flag for the selected tag label.

        The ``all`` filter is active when nothing (or ``All``) is selected.
        """
        selected = selected_tag or ALL_TAGS_LABEL
        rendered = []
        for tag_filter in tag_filters:
            item = tag_filter.to_dict()
            item["active"] = tag_filter.label == selected or (
                tag_filter.id == "all" and selected == ALL_TAGS_LABEL
            )
            rendered.append(item)
        return rendered
