"""Tests for collectionspine.models.query and models.base."""

from __future__ import annotations

import pytest

from collectionspine.models.base import SortDirection
from collectionspine.models.query import QueryOptions


class TestQueryOptions:
    """QueryOptions defaults and copying."""

    def test_defaults(self) -> None:
        """Defaults order newest first with ten items per page."""
        opts = QueryOptions()
        assert opts.filters == {}
        assert opts.order_by == "date_published"
        assert opts.direction is SortDirection.DESC
        assert opts.page is None
        assert opts.per_page == 10
        assert opts.offset == 0

    def test_copy_is_independent(self) -> None:
        """Copies do not share the filters dict."""
        opts = QueryOptions(filters={"status": "published"}, per_page=5)
        copied = opts.copy()
        copied.filters["tags"] = "python"
        copied.per_page = 50
        assert opts.filters == {"status": "published"}
        assert opts.per_page == 5


class TestSortDirection:
    """SortDirection parsing."""

    @pytest.mark.parametrize("value", ["desc", "DESC", " Desc "])
    def test_case_insensitive(self, value: str) -> None:
        """Lookup ignores case and whitespace."""
        assert SortDirection(value) is SortDirection.DESC

    def test_invalid(self) -> None:
        """Unknown directions are rejected."""
        with pytest.raises(ValueError):
            SortDirection("sideways")
