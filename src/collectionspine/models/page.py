"""Paginated results returned by ``CollectionBuilder.get()``.

Example:
    >>> from collectionspine.models.page import Pagination
    >>> p = Pagination(current_page=2, total_pages=3, total_items=25, items_per_page=10)
    >>> p.has_prev, p.has_next
    (True, True)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pydantic import Field, computed_field

from collectionspine.models.base import CollectionSpineModel
from collectionspine.models.item import TransformedItem


class Pagination(CollectionSpineModel):
    """Pagination metadata in the shape templates expect."""

    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=1, ge=1)
    total_items: int = Field(default=0, ge=0)
    items_per_page: int = Field(default=10, ge=0)
    offset: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class PageResult(CollectionSpineModel):
    """One page of transformed items.

    Example:
        >>> from collectionspine.models.page import PageResult
        >>> from collectionspine.models.item import TransformedItem
        >>> page = PageResult(items=[TransformedItem(title="a"), TransformedItem(title="b")])
        >>> [item.title for item in page]
        ['a', 'b']
        >>> len(page)
        2
    """

    items: list[TransformedItem] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    def __iter__(self) -> Iterator[TransformedItem]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def each(self, callback: Callable[[TransformedItem], object]) -> None:
        """Call ``callback`` for every item, in order."""
        for item in self.items:
            callback(item)
