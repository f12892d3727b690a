"""
Tests for blog query parameter parsing and pagination.
"""
import pytest
from pydantic import ValidationError

from app.blog.models import Pagination, QueryParams, parse_positive_int
from post_service.catalog import build_default_posts, build_default_tag_filters
from post_service.models import Author, Post


class TestQueryParams:
    """Test building QueryParams from raw query-string values."""

    def test_defaults(self):
        params = QueryParams.from_args({})
        assert params == QueryParams(tag=None, page=1, limit=12, featured=False)

    def test_explicit_values(self):
        params = QueryParams.from_args({"tag": "GST", "page": "3", "limit": "5", "featured": "true"})
        assert params.tag == "GST"
        assert params.page == 3
        assert params.limit == 5
        assert params.featured is True

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "two"])
    def test_non_numeric_falls_back_to_defaults(self, raw):
        params = QueryParams.from_args({"page": raw, "limit": raw})
        assert params.page == 1
        assert params.limit == 12

    @pytest.mark.parametrize("raw", ["0", "-1", "-50"])
    def test_non_positive_values_are_clamped(self, raw):
        params = QueryParams.from_args({"page": raw, "limit": raw})
        assert params.page == 1
        assert params.limit == 1

    def test_limit_is_capped(self):
        params = QueryParams.from_args({"limit": "5000"}, max_limit=100)
        assert params.limit == 100

    def test_configured_default_limit(self):
        params = QueryParams.from_args({}, default_limit=6)
        assert params.limit == 6

    @pytest.mark.parametrize("raw", ["True", "1", "yes", "false", ""])
    def test_only_literal_true_enables_featured(self, raw):
        assert QueryParams.from_args({"featured": raw}).featured is False

    def test_empty_tag_means_no_filter(self):
        assert QueryParams.from_args({"tag": ""}).tag is None

    @pytest.mark.parametrize("kwargs", [{"page": 0}, {"page": -1}, {"limit": 0}, {"limit": -5}])
    def test_non_positive_values_are_rejected(self, kwargs):
        """Direct construction refuses page or limit below 1."""
        with pytest.raises(ValueError):
            QueryParams(**kwargs)

    def test_zero_default_limit_is_clamped(self):
        assert QueryParams.from_args({}, default_limit=0).limit == 1

    def test_parse_positive_int_strips_whitespace(self):
        assert parse_positive_int(" 4 ", 1) == 4
        assert parse_positive_int(None, 7) == 7


class TestPagination:
    """Test the Pagination data structure."""

    def test_empty_result_has_zero_pages(self):
        pagination = Pagination(0, page=1, per_page=12)
        assert pagination.total_pages == 0
        assert pagination.has_next is False
        assert pagination.has_prev is False
        assert pagination.get_page_items([]) == []

    def test_partial_last_page(self):
        pagination = Pagination(12, page=3, per_page=5)
        assert pagination.total_pages == 3
        assert pagination.get_page_items(list(range(12))) == [10, 11]
        assert pagination.has_next is False
        assert pagination.has_prev is True

    def test_non_positive_inputs_are_clamped(self):
        pagination = Pagination(12, page=-1, per_page=0)
        assert pagination.page == 1
        assert pagination.per_page == 1
        assert pagination.total_pages == 12
        assert pagination.get_page_items(list(range(12))) == [0]

    def test_page_is_not_clamped(self):
        pagination = Pagination(12, page=999, per_page=12)
        assert pagination.page == 999
        assert pagination.get_page_items(list(range(12))) == []
        assert pagination.to_dict()["currentPage"] == 999


class TestPostModels:
    """Test the post catalog and models."""

    def test_catalog_size_and_ids(self):
        posts = build_default_posts()
        assert len(posts) == 12
        assert len({p.id for p in posts}) == 12

    def test_single_featured_post(self):
        assert [p.id for p in build_default_posts() if p.featured] == ["1"]

    def test_tag_filter_catalog(self):
        filters = build_default_tag_filters()
        assert [f.id for f in filters] == ["all", "gst", "automation", "compliance", "technology"]

    def test_posts_are_frozen(self):
        post = build_default_posts()[0]
        with pytest.raises(ValidationError):
            post.title = "changed"
        with pytest.raises(AttributeError):
            post.tags.append("Zebra")
        assert post.tags == ("GST", "Compliance", "Business")

    def test_featured_defaults_to_false(self):
        post = Post(id="x", title="X", author=Author(name="A"))
        assert post.featured is False
        assert post.tags == ()

    def test_has_tag(self):
        post = build_default_posts()[2]
        assert post.has_tag("expense tracking")
        assert not post.has_tag("expense")
