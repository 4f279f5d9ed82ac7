"""Base models and shared types.

Example:
    >>> from collectionspine.models.base import SortDirection
    >>> SortDirection.DESC.value
    'desc'
    >>> SortDirection("ASC")
    <SortDirection.ASC: 'asc'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SortDirection(str, Enum):
    """Ordering direction handed to repositories.

    Lookup is case-insensitive so template input like ``"DESC"`` works.
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def _missing_(cls, value: object) -> SortDirection | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class CollectionSpineModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )
