"""
Factory for creating the blog module.
"""
from typing import Optional, Sequence

from post_service.catalog import build_default_posts, build_default_tag_filters
from post_service.models import Post, TagFilter
from .services import PostQueryService, PostRenderer
from .routes import create_blog_routes


def create_blog_module(
    blog_template: str,
    blog_config=None,
    posts: Optional[Sequence[Post]] = None,
    tag_filters: Optional[Sequence[TagFilter]] = None,
    subscribe_url: str = "/api/newsletter/subscribe",
) -> dict:
    """Create blog module with services and routes.

    Args:
        blog_template: HTML template for the blog page
        blog_config: BlogConfig with page size settings
        posts: Post collection, the built-in catalog when omitted
        tag_filters: Tag filter catalog, the built-in one when omitted
        subscribe_url: Where the page's sign-up forms post to

    Returns:
        Dictionary containing the services and blueprint
    """
    query_service = PostQueryService(
        posts if posts is not None else build_default_posts(),
        tag_filters if tag_filters is not None else build_default_tag_filters(),
    )
    renderer = PostRenderer()

    blueprint = create_blog_routes(
        query_service,
        renderer,
        blog_template,
        blog_config,
        subscribe_url,
    )

    return {
        "service": query_service,
        "renderer": renderer,
        "blueprint": blueprint,
    }
