"""In-memory repository.

Provides a complete in-memory implementation of CollectionRepository,
useful for testing, development, the CLI and small static sites.

Example:
    >>> from collectionspine.repository.memory import MemoryRepository
    >>> repo = MemoryRepository()
    >>> repo.add("blog", {"slug": "a", "status": "published"})
    >>> result = repo.query("blog", {"status": "published"}, "date_published", "desc", None, 10, 0)
    >>> [item["slug"] for item in result.items]
    ['a']
"""

from __future__ import annotations

import json
import logging
import math
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from collectionspine.core.exceptions import RepositoryError
from collectionspine.models.base import SortDirection
from collectionspine.models.result import RepositoryMeta, RepositoryResult
from collectionspine.render.dates import parse_date

logger = logging.getLogger(__name__)

# Sentinel for date filters: items without a parseable date never match
_NO_DATE = datetime.min.replace(tzinfo=UTC)

_LIST_FILTERS = ("tags", "author")


def _split(value: Any) -> set[str]:
    """Normalize a comma-separated string or list into lowercase values."""
    if value is None:
        return set()
    if isinstance(value, str):
        parts: Iterable[Any] = value.split(",")
    elif isinstance(value, Iterable):
        parts = value
    else:
        parts = [value]
    return {str(p).strip().lower() for p in parts if str(p).strip()}


def _item_date(item: Mapping[str, Any]) -> datetime:
    raw = item.get("date_published") or item.get("date")
    if not raw:
        return _NO_DATE
    return parse_date(raw, now=_NO_DATE)


class MemoryRepository:
    """Collections of raw item mappings held in dictionaries.

    Data is lost when the process exits.

    Best for: Testing, development, small datasets.
    """

    def __init__(self, collections: Mapping[str, Iterable[Mapping[str, Any]]] | None = None) -> None:
        self._collections: dict[str, list[dict[str, Any]]] = defaultdict(list)
        for name, items in (collections or {}).items():
            self.add(name, *items)

    @classmethod
    def from_mapping(cls, data: Any) -> MemoryRepository:
        """Build a repository from ``{"collection": [item, ...]}``.

        Raises:
            RepositoryError: If the data is not a mapping of item lists.
        """
        if not isinstance(data, Mapping):
            raise RepositoryError("Content data must be an object of collections")
        for name, items in data.items():
            if not isinstance(items, list) or not all(isinstance(i, Mapping) for i in items):
                raise RepositoryError(f"Collection {name!r} must be a list of objects")
        return cls(data)

    @classmethod
    def from_json(cls, path: str | Path) -> MemoryRepository:
        """Load collections from a JSON file.

        Raises:
            RepositoryError: If the file is missing, unreadable or malformed.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise RepositoryError(f"Content file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise RepositoryError(f"Failed to load content file {path}: {e}") from e

        repo = cls.from_mapping(data)
        logger.debug("Loaded %d collection(s) from %s", len(repo.collections), path)
        return repo

    @property
    def collections(self) -> list[str]:
        """Names of the known collections."""
        return sorted(self._collections)

    def add(self, collection: str, *items: Mapping[str, Any]) -> None:
        """Append raw items to a collection."""
        self._collections[collection].extend(dict(item) for item in items)

    def query(
        self,
        collection: str,
        filters: dict[str, Any],
        order_by: str,
        direction: SortDirection | str,
        page: int | None,
        per_page: int,
        offset: int,
    ) -> RepositoryResult:
        """Filter, order and paginate a collection.

        With ``page=None`` the first ``per_page`` items are returned, or all
        of them when ``per_page <= 0``. Paged queries treat ``per_page <= 0``
        as a page size of 1.
        """
        items = [item for item in self._collections.get(collection, []) if self._matches(item, filters)]
        items = self._sort(items, order_by, SortDirection(direction))

        items = items[max(0, offset) :]
        total = len(items)
        size = max(1, per_page)
        last_page = max(1, math.ceil(total / size))

        if page is None:
            current = 1
            # per_page <= 0 means no cap
            window = items[:size] if per_page > 0 else items
        else:
            current = max(1, page)
            start = (current - 1) * size
            window = items[start : start + size]

        meta = RepositoryMeta(
            current_page=current,
            last_page=last_page,
            total_items=total,
            per_page=size,
            offset=max(0, offset),
        )
        return RepositoryResult(items=window, meta=meta, count=total)

    # --- Filtering ---

    def _matches(self, item: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
        for key, expected in filters.items():
            if expected is None:
                continue
            if key in _LIST_FILTERS:
                wanted = _split(expected)
                if wanted and not wanted & _split(item.get(key)):
                    return False
            elif key == "featured":
                if bool(item.get("featured")) != bool(expected):
                    return False
            elif key in ("date_before", "date_after"):
                item_date = _item_date(item)
                if item_date == _NO_DATE:
                    return False
                bound = parse_date(expected)
                if key == "date_before" and not item_date < bound:
                    return False
                if key == "date_after" and not item_date > bound:
                    return False
            elif item.get(key) != expected:
                return False
        return True

    @staticmethod
    def _sort(items: list[dict[str, Any]], order_by: str, direction: SortDirection) -> list[dict[str, Any]]:
        present = [i for i in items if i.get(order_by) is not None]
        missing = [i for i in items if i.get(order_by) is None]

        def key(item: dict[str, Any]) -> Any:
            value = item[order_by]
            if order_by.startswith("date"):
                return parse_date(value, now=_NO_DATE)
            return (type(value).__name__, value)

        present.sort(key=key, reverse=direction is SortDirection.DESC)
        # Missing values sort last in both directions
        return present + missing
