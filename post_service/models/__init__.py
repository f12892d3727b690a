"""
Models package for blog post data.

Re-exports the Pydantic models so callers can import them from
``post_service.models`` directly.
"""

from .post_models import Author, Post, TagFilter, NewsletterSubscription

__all__ = [
    "Author",
    "Post",
    "TagFilter",
    "NewsletterSubscription",
]
