"""Tests for collectionspine.repository.memory - MemoryRepository.

The in-memory repository is the reference implementation of the
CollectionRepository protocol.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from collectionspine.core.exceptions import RepositoryError
from collectionspine.models.base import SortDirection
from collectionspine.protocols.repository import CollectionRepository
from collectionspine.repository.memory import MemoryRepository

# =============================================================================
# Fixtures
# =============================================================================


POSTS: list[dict[str, Any]] = [
    {
        "slug": "a",
        "title": "Alpha",
        "status": "published",
        "featured": True,
        "tags": ["python", "web"],
        "author": "ada",
        "date_published": "2024-01-01",
    },
    {
        "slug": "b",
        "title": "Beta",
        "status": "published",
        "tags": "rust",
        "author": "grace",
        "date_published": "2024-02-01",
    },
    {
        "slug": "c",
        "title": "Gamma",
        "status": "draft",
        "tags": ["Python"],
        "author": "ada",
        "date_published": "2024-03-01",
    },
    {"slug": "d", "title": "Delta", "status": "published"},
]


@pytest.fixture
def repo() -> MemoryRepository:
    return MemoryRepository({"blog": POSTS})


def slugs(result: Any) -> list[str]:
    return [item["slug"] for item in result.items]


def query(repo: MemoryRepository, filters: dict[str, Any] | None = None, **kwargs: Any) -> Any:
    params: dict[str, Any] = {
        "order_by": "date_published",
        "direction": SortDirection.DESC,
        "page": None,
        "per_page": 10,
        "offset": 0,
    }
    params.update(kwargs)
    return repo.query("blog", filters or {}, **params)


# =============================================================================
# Protocol & loading
# =============================================================================


class TestMemoryRepositoryBasics:
    """Construction and loading."""

    def test_implements_protocol(self, repo: MemoryRepository) -> None:
        """MemoryRepository satisfies CollectionRepository."""
        assert isinstance(repo, CollectionRepository)

    def test_unknown_collection_is_empty(self, repo: MemoryRepository) -> None:
        """Unknown collections return no items and a zero count."""
        result = repo.query("missing", {}, "date_published", SortDirection.DESC, None, 10, 0)
        assert result.items == []
        assert result.count == 0
        assert result.meta is not None
        assert result.meta.last_page == 1

    def test_add(self) -> None:
        """Items can be appended later."""
        repo = MemoryRepository()
        repo.add("pages", {"slug": "about"}, {"slug": "contact"})
        assert repo.collections == ["pages"]
        assert query_pages(repo) == ["about", "contact"]

    def test_from_json(self, tmp_path: Path) -> None:
        """Collections load from a JSON file."""
        path = tmp_path / "content.json"
        path.write_text(json.dumps({"blog": POSTS, "pages": []}), encoding="utf-8")
        repo = MemoryRepository.from_json(path)
        assert repo.collections == ["blog", "pages"]

    def test_from_json_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise RepositoryError."""
        with pytest.raises(RepositoryError, match="not found"):
            MemoryRepository.from_json(tmp_path / "nope.json")

    def test_from_json_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises RepositoryError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RepositoryError):
            MemoryRepository.from_json(path)

    @pytest.mark.parametrize("data", [[1, 2], {"blog": "nope"}, {"blog": [1]}])
    def test_from_mapping_wrong_shape(self, data: Any) -> None:
        """Data must map names to lists of objects."""
        with pytest.raises(RepositoryError):
            MemoryRepository.from_mapping(data)


def query_pages(repo: MemoryRepository) -> list[str]:
    result = repo.query("pages", {}, "title", SortDirection.ASC, None, 10, 0)
    return slugs(result)


# =============================================================================
# Filtering
# =============================================================================


class TestMemoryRepositoryFilters:
    """Filter semantics."""

    def test_status(self, repo: MemoryRepository) -> None:
        """status is an equality match."""
        assert slugs(query(repo, {"status": "draft"})) == ["c"]

    def test_featured(self, repo: MemoryRepository) -> None:
        """featured compares truthiness."""
        assert slugs(query(repo, {"featured": True})) == ["a"]
        assert sorted(slugs(query(repo, {"featured": False}))) == ["b", "c", "d"]

    def test_tags_any_match_case_insensitive(self, repo: MemoryRepository) -> None:
        """Comma-separated tags match any, ignoring case."""
        assert slugs(query(repo, {"tags": "python"})) == ["c", "a"]
        assert slugs(query(repo, {"tags": "RUST,web"})) == ["b", "a"]

    def test_author(self, repo: MemoryRepository) -> None:
        """author works like tags."""
        assert slugs(query(repo, {"author": "grace"})) == ["b"]

    def test_date_range(self, repo: MemoryRepository) -> None:
        """date_before/date_after are exclusive and skip undated items."""
        assert slugs(query(repo, {"date_after": "2024-01-01"})) == ["c", "b"]
        assert slugs(query(repo, {"date_before": "2024-03-01"})) == ["b", "a"]

    def test_other_keys_equality(self, repo: MemoryRepository) -> None:
        """Unknown keys compare raw fields."""
        assert slugs(query(repo, {"title": "Delta"})) == ["d"]

    def test_none_filters_ignored(self, repo: MemoryRepository) -> None:
        """None values do not filter."""
        assert len(query(repo, {"status": None}).items) == 4


# =============================================================================
# Ordering & pagination
# =============================================================================


class TestMemoryRepositoryOrdering:
    """Sorting."""

    def test_desc_missing_last(self, repo: MemoryRepository) -> None:
        """Newest first, undated items last."""
        assert slugs(query(repo)) == ["c", "b", "a", "d"]

    def test_asc_missing_last(self, repo: MemoryRepository) -> None:
        """Oldest first, undated items still last."""
        assert slugs(query(repo, direction=SortDirection.ASC)) == ["a", "b", "c", "d"]

    def test_string_direction(self, repo: MemoryRepository) -> None:
        """Plain strings are accepted as directions."""
        assert slugs(query(repo, order_by="title", direction="asc")) == ["a", "b", "d", "c"]


class TestMemoryRepositoryPagination:
    """Paging, offsets and metadata."""

    def test_unpaginated_caps_at_per_page(self, repo: MemoryRepository) -> None:
        """page=None returns the first per_page items with the full count."""
        result = query(repo, per_page=2)
        assert slugs(result) == ["c", "b"]
        assert result.count == 4

    def test_unpaginated_without_cap(self, repo: MemoryRepository) -> None:
        """page=None with per_page <= 0 returns every item."""
        assert slugs(query(repo, per_page=0)) == ["c", "b", "a", "d"]
        assert len(query(repo, per_page=-1).items) == 4

    def test_page_two(self, repo: MemoryRepository) -> None:
        """Pages slice by per_page."""
        result = query(repo, page=2, per_page=3)
        assert slugs(result) == ["d"]
        assert result.meta is not None
        assert result.meta.current_page == 2
        assert result.meta.last_page == 2
        assert result.meta.total_items == 4

    def test_offset_before_paging(self, repo: MemoryRepository) -> None:
        """Offset skips items before pagination."""
        result = query(repo, page=1, per_page=2, offset=1)
        assert slugs(result) == ["b", "a"]
        assert result.count == 3
        assert result.meta is not None
        assert result.meta.offset == 1
        assert result.meta.last_page == 2

    def test_page_past_end(self, repo: MemoryRepository) -> None:
        """Pages beyond the end are empty."""
        assert query(repo, page=9, per_page=2).items == []
