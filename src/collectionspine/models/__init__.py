"""Pydantic models and option types for CollectionSpine."""

from collectionspine.models.base import CollectionSpineModel, SortDirection
from collectionspine.models.item import TransformedItem, TransformOptions
from collectionspine.models.page import PageResult, Pagination
from collectionspine.models.query import QueryOptions
from collectionspine.models.result import RepositoryMeta, RepositoryResult

__all__ = [
    # Base
    "CollectionSpineModel",
    "SortDirection",
    # Items
    "TransformedItem",
    "TransformOptions",
    # Query
    "QueryOptions",
    # Results
    "PageResult",
    "Pagination",
    "RepositoryMeta",
    "RepositoryResult",
]
