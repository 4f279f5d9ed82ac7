"""Typed view of repository responses.

Repositories may answer with a plain mapping; ``RepositoryResult.coerce``
turns either form into a model. Metadata keys are accepted in camelCase
(``currentPage``) or snake_case (``current_page``).

Example:
    >>> from collectionspine.models.result import RepositoryResult
    >>> result = RepositoryResult.coerce(
    ...     {"items": [{"slug": "a"}], "meta": {"currentPage": 2, "lastPage": 3}}
    ... )
    >>> result.meta.current_page, result.meta.last_page
    (2, 3)
    >>> result.count is None
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field

from collectionspine.models.base import CollectionSpineModel


class RepositoryMeta(CollectionSpineModel):
    """Pagination metadata reported by a repository. Every field is optional."""

    model_config = ConfigDict(extra="ignore")

    current_page: int | None = Field(default=None, alias="currentPage")
    last_page: int | None = Field(default=None, alias="lastPage")
    total_items: int | None = Field(default=None, alias="totalItems")
    per_page: int | None = Field(default=None, alias="perPage")
    offset: int | None = Field(default=None)


class RepositoryResult(CollectionSpineModel):
    """Items plus optional metadata and explicit count."""

    model_config = ConfigDict(extra="ignore")

    items: list[Any] = Field(default_factory=list)
    meta: RepositoryMeta | None = None
    count: int | None = None

    @classmethod
    def coerce(cls, value: RepositoryResult | Mapping[str, Any] | None) -> RepositoryResult:
        """Normalize a repository response; ``None`` becomes an empty result."""
        if value is None:
            return cls()
        if isinstance(value, RepositoryResult):
            return value
        data = dict(value)
        # None values stand for "absent" in loosely typed responses
        if data.get("items") is None:
            data.pop("items", None)
        return cls.model_validate(data)
