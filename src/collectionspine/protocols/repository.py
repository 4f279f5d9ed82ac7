"""Repository protocol.

Defines the interface the builder uses to fetch raw collection items.

Example:
    >>> from collectionspine.protocols.repository import CollectionRepository
    >>> from collectionspine.repository.memory import MemoryRepository
    >>> isinstance(MemoryRepository(), CollectionRepository)
    True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collectionspine.models.base import SortDirection
    from collectionspine.models.result import RepositoryResult


@runtime_checkable
class CollectionRepository(Protocol):
    """Repository protocol.

    Implementations own storage, filtering, ordering and pagination. The
    builder passes its options through verbatim and never inspects raw items.

    See Also:
        collectionspine.repository.memory.MemoryRepository: In-memory implementation
    """

    def query(
        self,
        collection: str,
        filters: dict[str, Any],
        order_by: str,
        direction: SortDirection,
        page: int | None,
        per_page: int,
        offset: int,
    ) -> RepositoryResult | Mapping[str, Any]:
        """Query a collection.

        Args:
            collection: Collection name.
            filters: Filter key/value pairs.
            order_by: Field to order by.
            direction: Ordering direction.
            page: 1-indexed page, or None for the first ``per_page`` items.
            per_page: Page size.
            offset: Items skipped before pagination.

        Returns:
            ``{"items": [...], "meta": {...}, "count": int}``; meta and count
            are optional.
        """
        ...


RepositoryFactory = Callable[[Path, dict[str, Any]], CollectionRepository]
"""Builds a repository from a content path and repository options."""
