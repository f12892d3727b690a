"""
Factory for creating the newsletter module.
"""
from .services import NewsletterService
from .routes import create_newsletter_routes


def create_newsletter_module(return_path: str = "/blog") -> dict:
    """
    Create the newsletter module with all its components.

    Args:
        return_path: Page that form posts are redirected back to

    Returns:
        Dictionary containing:
            - service: NewsletterService instance
            - blueprint: Flask blueprint for routes
    """
    service = NewsletterService()
    blueprint = create_newsletter_routes(service, return_path)

    return {
        "service": service,
        "blueprint": blueprint
    }
