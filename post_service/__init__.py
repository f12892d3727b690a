# Post service package for blog content and shared service plumbing

from .models import Author, Post, TagFilter, NewsletterSubscription
from .catalog import (
    ALL_TAGS_LABEL,
    build_default_posts,
    build_default_tag_filters,
)
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "Author",
    "Post",
    "TagFilter",
    "NewsletterSubscription",
    "ALL_TAGS_LABEL",
    "build_default_posts",
    "build_default_tag_filters",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
