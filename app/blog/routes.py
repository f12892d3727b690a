"""
Blog routes for the post query API and the blog page.
"""
import logging
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, render_template_string, request, url_for

from post_service.catalog import ALL_TAGS_LABEL
from .models import QueryParams, QueryResult
from .services import PostQueryService, PostRenderer

logger = logging.getLogger(__name__)

QUERY_FAILED_MESSAGE = "Failed to fetch blog posts"


def create_blog_routes(
    query_service: PostQueryService,
    post_renderer: PostRenderer,
    blog_template: str,
    blog_config=None,
    subscribe_url: str = "/api/newsletter/subscribe",
) -> Blueprint:
    """Create blog routes."""
    bp = Blueprint('blog', __name__)

    default_limit = blog_config.default_page_size if blog_config else 12
    max_limit = blog_config.max_page_size if blog_config else 100
    site_name = blog_config.site_name if blog_config else "Suvit"

    def _get_query_params() -> QueryParams:
        """Extract and validate query parameters from request."""
        return QueryParams.from_args(request.args, default_limit=default_limit, max_limit=max_limit)

    def _page_url(tag: Optional[str], page: int) -> str:
        args: Dict[str, Any] = {"page": page}
        if tag and tag != ALL_TAGS_LABEL:
            args["tag"] = tag
        return url_for("blog.blog_page", **args)

    def _build_template_context(result: Optional[QueryResult], selected_tag: Optional[str], error: Optional[str]) -> Dict[str, Any]:
        """Build the template context with all necessary data."""
        context: Dict[str, Any] = {
            'site_name': site_name,
            'selected_tag': selected_tag or ALL_TAGS_LABEL,
            'tag_filters': post_renderer.mark_active_filters(query_service.tag_filters, selected_tag),
            'tag_urls': {
                tag_filter.label: _page_url(tag_filter.label, 1)
                for tag_filter in query_service.tag_filters
            },
            'subscribe_url': subscribe_url,
            'subscribed': request.args.get("subscribed"),
            'retry_url': _page_url(selected_tag, 1),
            'error': error,
            'posts': [],
            'featured_post': None,
            'current_page': 1,
            'total_pages': 0,
            'has_next': False,
            'has_prev': False,
            'prev_url': None,
            'next_url': None,
        }
        if result is None:
            return context

        posts = post_renderer.render_posts(result.posts)
        featured_source = result.featured or result.posts
        pagination = result.pagination
        context.update({
            'posts': posts,
            'featured_post': post_renderer.render_post(featured_source[0]) if featured_source else None,
            'current_page': pagination.page,
            'total_pages': pagination.total_pages,
            'has_next': pagination.has_next,
            'has_prev': pagination.has_prev,
            'prev_url': _page_url(selected_tag, pagination.page - 1) if pagination.has_prev else None,
            'next_url': _page_url(selected_tag, pagination.page + 1) if pagination.has_next else None,
        })
        return context

    @bp.route("/api/blog", methods=["GET"])
    def list_posts():
        """
        Query blog posts.

        Query parameters:
            - tag: Tag label, case-insensitive ("All" disables the filter)
            - page: Page number (default 1)
            - limit: Posts per page (default 12)
            - featured: "true" to keep featured posts only
        """
        try:
            params = _get_query_params()
            result = query_service.query(params)
            return jsonify(result.to_dict())
        except Exception:
            logger.exception("Blog API error")
            return jsonify({"error": QUERY_FAILED_MESSAGE}), 500

    @bp.route("/blog", methods=["GET"])
    def blog_page():
        """Render the blog page for the selected tag and page."""
        selected_tag = request.args.get("tag") or None
        try:
            params = QueryParams.from_args(
                {"tag": selected_tag or "", "page": request.args.get("page", "1")},
                default_limit=default_limit,
                max_limit=max_limit,
            )
            result = query_service.query(params)
        except Exception:
            logger.exception("Blog page query failed")
            context = _build_template_context(None, selected_tag, QUERY_FAILED_MESSAGE)
            return render_template_string(blog_template, **context), 500

        context = _build_template_context(result, selected_tag, None)
        return render_template_string(blog_template, **context)

    return bp
