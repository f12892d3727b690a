"""
Basic import tests to verify the core functionality.
"""

import logging


def test_post_service_imports():
    """Test that post_service modules can be imported."""
    from post_service import (
        Post,
        TagFilter,
        build_default_posts,
        build_default_tag_filters,
        setup_logging,
        get_logger,
    )

    assert callable(build_default_posts)
    assert callable(build_default_tag_filters)
    assert callable(setup_logging)
    assert isinstance(build_default_posts()[0], Post)
    assert isinstance(build_default_tag_filters()[0], TagFilter)
    assert get_logger("x").name == "x"


def test_app_module_imports():
    """Test that the blog and newsletter modules can be imported."""
    from app.blog import PostQueryService, QueryParams, create_blog_module
    from app.newsletter import NewsletterService, create_newsletter_module

    assert callable(create_blog_module)
    assert callable(create_newsletter_module)
    assert QueryParams().limit == 12
    assert NewsletterService().get_stats()["total"] == 0
    assert PostQueryService([], []).query(QueryParams()).posts == []


def test_logging_setup_and_stop():
    """Test that logging can be configured and torn down."""
    from post_service.logging_config import ThreadSafeLoggingConfig

    config = ThreadSafeLoggingConfig()
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        config.setup_logging(debug=False)
        assert config.is_running
        assert root.level == logging.INFO
        assert logging.getLogger("werkzeug").level == logging.WARNING
        logging.getLogger("test").info("queued record")
    finally:
        config.stop()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    assert not config.is_running
