"""
Newsletter module for e-mail sign-ups from the blog page.
"""

from .models import SubscribeStatus, SubscribeResult
from .services import NewsletterService
from .routes import create_newsletter_routes
from .factory import create_newsletter_module

__all__ = [
    "SubscribeStatus",
    "SubscribeResult",
    "NewsletterService",
    "create_newsletter_routes",
    "create_newsletter_module",
]
