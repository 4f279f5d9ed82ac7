"""Query options accumulated by ``CollectionBuilder``.

Example:
    >>> from collectionspine.models.query import QueryOptions
    >>> opts = QueryOptions(filters={"status": "published"})
    >>> copied = opts.copy()
    >>> copied.filters["status"] = "draft"
    >>> opts.filters["status"]
    'published'
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from collectionspine.models.base import SortDirection


@dataclass
class QueryOptions:
    """Filters, ordering, pagination and URL settings for one collection query.

    Attributes:
        filters: Filter key/value pairs handed to the repository.
        order_by: Field to order by.
        direction: Ordering direction.
        page: 1-indexed page, or None for an unpaginated fetch.
        per_page: Page size; also the item cap for ``all()`` and feeds.
            Zero or less means "unset".
        offset: Number of items skipped before pagination.
        page_path: Detail page path for item URLs.
        pretty_urls: Whether item URLs use path segments.
        tag_page_path: Tag listing page path, forwarded to repositories.
        author_page_path: Author listing page path, forwarded to repositories.
    """

    filters: dict[str, Any] = field(default_factory=dict)
    order_by: str = "date_published"
    direction: SortDirection = SortDirection.DESC
    page: int | None = None
    per_page: int = 10
    offset: int = 0
    page_path: str | None = None
    pretty_urls: bool = False
    tag_page_path: str | None = None
    author_page_path: str | None = None

    def copy(self) -> QueryOptions:
        """Return an independent copy (filters are copied, not shared)."""
        return replace(self, filters={**self.filters})
