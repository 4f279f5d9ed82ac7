"""
CollectionSpine - Fluent content collection queries and feeds.

CollectionSpine lets a template layer retrieve, filter, sort and paginate a
named collection of content items, and render it as RSS 2.0 or a sitemap.
Storage and item shaping are delegated to pluggable collaborators.

Quick Start:
    >>> from collectionspine import CollectionBuilder, MemoryRepository
    >>> repo = MemoryRepository({"blog": [{"slug": "hello", "title": "Hello"}]})
    >>> posts = CollectionBuilder("content/blog", repository=repo, options={"page_path": "posts", "pretty_urls": True})
    >>> posts.first().url
    'posts/hello'

Architecture:
    Builder: CollectionBuilder
    Repositories: MemoryRepository (CollectionRepository protocol)
    Transformers: DefaultTransformer (ItemTransformer protocol)
    Renderers: render_rss, render_sitemap
"""

from collectionspine.builder import CollectionBuilder
from collectionspine.core.config import Settings, get_settings
from collectionspine.core.exceptions import (
    CollectionSpineError,
    ConfigurationError,
    RepositoryError,
)
from collectionspine.models.base import SortDirection
from collectionspine.models.item import TransformedItem, TransformOptions
from collectionspine.models.page import PageResult, Pagination
from collectionspine.models.query import QueryOptions
from collectionspine.models.result import RepositoryMeta, RepositoryResult
from collectionspine.protocols.repository import CollectionRepository, RepositoryFactory
from collectionspine.protocols.transformer import ItemTransformer
from collectionspine.render import absolutize, render_rss, render_sitemap
from collectionspine.repository.memory import MemoryRepository
from collectionspine.transformer import DefaultTransformer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Builder
    "CollectionBuilder",
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "CollectionSpineError",
    "ConfigurationError",
    "RepositoryError",
    # Models
    "SortDirection",
    "TransformedItem",
    "TransformOptions",
    "PageResult",
    "Pagination",
    "QueryOptions",
    "RepositoryMeta",
    "RepositoryResult",
    # Protocols
    "CollectionRepository",
    "RepositoryFactory",
    "ItemTransformer",
    # Collaborators
    "MemoryRepository",
    "DefaultTransformer",
    # Rendering
    "render_rss",
    "render_sitemap",
    "absolutize",
]
