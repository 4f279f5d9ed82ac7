"""Fluent collection query builder.

Templates configure a builder with chained calls, then run one terminal
operation: ``all()``, ``get()``, ``first()``, ``count()``, ``rss()`` or
``sitemap()``. Storage and item shaping are delegated to a repository and
a transformer.

Example:
    >>> from collectionspine.builder import CollectionBuilder
    >>> from collectionspine.repository.memory import MemoryRepository
    >>> repo = MemoryRepository({"blog": [
    ...     {"slug": "a", "title": "A", "status": "published", "date_published": "2024-01-01"},
    ...     {"slug": "b", "title": "B", "status": "draft", "date_published": "2024-02-01"},
    ... ]})
    >>> posts = CollectionBuilder("content/blog", repository=repo)
    >>> [item.slug for item in posts.status("published").all()]
    ['a']
    >>> posts.count()
    1
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from collectionspine.core.config import Settings
from collectionspine.core.exceptions import ConfigurationError
from collectionspine.models.base import SortDirection
from collectionspine.models.item import TransformedItem, TransformOptions
from collectionspine.models.page import PageResult, Pagination
from collectionspine.models.query import QueryOptions
from collectionspine.models.result import RepositoryMeta, RepositoryResult
from collectionspine.protocols.repository import CollectionRepository, RepositoryFactory
from collectionspine.protocols.transformer import ItemTransformer
from collectionspine.render.rss import render_rss
from collectionspine.render.sitemap import render_sitemap
from collectionspine.transformer import DefaultTransformer

logger = logging.getLogger(__name__)


def _join(value: str | list[str] | tuple[str, ...]) -> str:
    if isinstance(value, str):
        return value
    return ",".join(value)


class CollectionBuilder:
    """Chainable query over one named collection.

    Setters return the builder itself and the last value per key wins.
    ``first()``, ``rss()`` and ``sitemap()`` run on a copy, so their
    overrides never leak into later calls.

    Args:
        collection_path: Path of the collection directory; its basename is
            the collection name and its parent is the content path.
        repository: Repository used for every query.
        repository_factory: Called per query with the content path and
            ``repository_options`` when no repository is given.
        transformer: Item transformer (default: DefaultTransformer).
        options: CMS options: ``page_path``, ``pretty_urls``,
            ``tag_page_path``, ``author_page_path``.
        settings: Defaults for ordering, page size and feeds.

    Example:
        >>> from collectionspine.builder import CollectionBuilder
        >>> b = CollectionBuilder("content/blog").status("published").filter({"status": "draft"})
        >>> b.query_options.filters
        {'status': 'draft'}
        >>> b.collection_name
        'blog'
    """

    __slots__ = (
        "collection_path",
        "_options",
        "_settings",
        "_repository",
        "_repository_factory",
        "_transformer",
        "_query",
    )

    def __init__(
        self,
        collection_path: str | Path,
        *,
        repository: CollectionRepository | None = None,
        repository_factory: RepositoryFactory | None = None,
        transformer: ItemTransformer | None = None,
        options: Mapping[str, Any] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.collection_path = Path(collection_path)
        self._options = dict(options or {})
        self._settings = settings or Settings()
        self._repository = repository
        self._repository_factory = repository_factory
        self._transformer = transformer or DefaultTransformer()
        self._query = QueryOptions(
            order_by=self._settings.default_order_by,
            direction=SortDirection(self._settings.default_direction),
            per_page=self._settings.default_per_page,
            page_path=self._options.get("page_path", self._settings.page_path),
            pretty_urls=bool(self._options.get("pretty_urls", self._settings.pretty_urls)),
            tag_page_path=self._options.get("tag_page_path"),
            author_page_path=self._options.get("author_page_path"),
        )

    @property
    def collection_name(self) -> str:
        return self.collection_path.name

    @property
    def content_path(self) -> Path:
        return self.collection_path.parent

    @property
    def query_options(self) -> QueryOptions:
        """Current options. Mutating the returned object changes the builder."""
        return self._query

    @property
    def repository_options(self) -> dict[str, Any]:
        """CMS options merged with the tag/author page settings."""
        options = dict(self._options)
        if self._query.tag_page_path is not None:
            options["tag_page_path"] = self._query.tag_page_path
            options["pretty_urls"] = self._query.pretty_urls
        if self._query.author_page_path is not None:
            options["author_page_path"] = self._query.author_page_path
            options["pretty_urls"] = self._query.pretty_urls
        return options

    def copy(self) -> CollectionBuilder:
        """Create an independent builder with the same collaborators and options.

        Example:
            >>> from collectionspine.builder import CollectionBuilder
            >>> b1 = CollectionBuilder("blog").limit(5)
            >>> b2 = b1.copy().limit(50)
            >>> b1.query_options.per_page, b2.query_options.per_page
            (5, 50)
        """
        new_builder = CollectionBuilder(
            self.collection_path,
            repository=self._repository,
            repository_factory=self._repository_factory,
            transformer=self._transformer,
            options=self._options,
            settings=self._settings,
        )
        new_builder._query = self._query.copy()
        return new_builder

    # --- Filters ---

    def filter(self, filters: Mapping[str, Any]) -> CollectionBuilder:
        """Merge filters; existing keys are overwritten."""
        self._query.filters.update(filters)
        return self

    def status(self, status: str) -> CollectionBuilder:
        self._query.filters["status"] = status
        return self

    def featured(self, featured: bool = True) -> CollectionBuilder:
        self._query.filters["featured"] = featured
        return self

    def tags(self, tags: str | list[str]) -> CollectionBuilder:
        """Filter by tags; lists are sent comma-separated."""
        self._query.filters["tags"] = _join(tags)
        return self

    def author(self, author: str | list[str]) -> CollectionBuilder:
        """Filter by author; lists are sent comma-separated."""
        self._query.filters["author"] = _join(author)
        return self

    def before(self, date: str) -> CollectionBuilder:
        self._query.filters["date_before"] = date
        return self

    def after(self, date: str) -> CollectionBuilder:
        self._query.filters["date_after"] = date
        return self

    # --- Ordering ---

    def order_by(self, field: str, direction: SortDirection | str = SortDirection.DESC) -> CollectionBuilder:
        self._query.order_by = field
        self._query.direction = SortDirection(direction)
        return self

    def latest(self) -> CollectionBuilder:
        """Newest first (by publication date)."""
        return self.order_by("date_published", SortDirection.DESC)

    def oldest(self) -> CollectionBuilder:
        return self.order_by("date_published", SortDirection.ASC)

    # --- Pagination ---

    def paginate(self, page: int, per_page: int = 10) -> CollectionBuilder:
        """Request page ``page`` (1-indexed) of ``per_page`` items."""
        self._query.page = max(1, page)
        self._query.per_page = max(0, per_page)
        return self

    def limit(self, limit: int) -> CollectionBuilder:
        self._query.per_page = max(0, limit)
        return self

    def offset(self, offset: int) -> CollectionBuilder:
        """Skip the first ``offset`` items; negative values count as 0."""
        self._query.offset = max(0, offset)
        return self

    # --- URL options ---

    def page_path(self, page_path: str) -> CollectionBuilder:
        self._query.page_path = page_path
        return self

    def tag_page_path(self, tag_page_path: str) -> CollectionBuilder:
        self._query.tag_page_path = tag_page_path
        return self

    def author_page_path(self, author_page_path: str) -> CollectionBuilder:
        self._query.author_page_path = author_page_path
        return self

    def pretty_urls(self, pretty_urls: bool = True) -> CollectionBuilder:
        self._query.pretty_urls = pretty_urls
        return self

    # --- Terminal operations ---

    def all(self) -> list[TransformedItem]:
        """Fetch up to ``per_page`` items from ``offset``, ignoring the page.

        With an unset (``<= 0``) per_page, the repository decides the cap;
        the in-memory repository returns every item.
        """
        result = self._fetch(page=None)
        return [self._transform(item) for item in result.items]

    def get(self) -> PageResult:
        """Fetch the configured page with pagination metadata.

        Example:
            >>> from collectionspine.builder import CollectionBuilder
            >>> from collectionspine.repository.memory import MemoryRepository
            >>> repo = MemoryRepository({"blog": [{"slug": str(i)} for i in range(25)]})
            >>> page = CollectionBuilder("blog", repository=repo).paginate(2, 10).get()
            >>> page.pagination.total_pages, page.pagination.has_next
            (3, True)
        """
        result = self._fetch(page=self._query.page)
        items = [self._transform(item) for item in result.items]
        meta = result.meta or RepositoryMeta()

        pagination = Pagination(
            current_page=max(1, meta.current_page if meta.current_page is not None else 1),
            total_pages=max(1, meta.last_page if meta.last_page is not None else 1),
            total_items=max(0, meta.total_items if meta.total_items is not None else len(items)),
            items_per_page=max(0, meta.per_page if meta.per_page is not None else self._query.per_page),
            offset=max(0, meta.offset if meta.offset is not None else self._query.offset),
        )
        return PageResult(items=items, pagination=pagination)

    def first(self) -> TransformedItem | None:
        """First matching item, or None."""
        items = self.copy().limit(1).all()
        return items[0] if items else None

    def count(self) -> int:
        """Number of matching items, preferring the repository's own count."""
        result = self._fetch(page=None)
        if result.count is not None:
            return result.count
        return len(result.items)

    def rss(self, title: str | None = None, description: str | None = None, link: str | None = None) -> str:
        """Render the newest items as an RSS 2.0 feed.

        Args:
            title: Channel title (default: "<Collection> Feed").
            description: Channel description (default: "RSS feed for <collection>").
            link: Site URL; also the base for relative item links.

        Returns:
            RSS XML text.
        """
        name = self.collection_name
        if title is None:
            title = f"{name[:1].upper()}{name[1:]} Feed"
        if description is None:
            description = f"RSS feed for {name}"

        items = self._feed_items(self._settings.rss_limit)
        logger.debug("Rendering RSS for %s with %d item(s)", name, len(items))
        return render_rss(items, title=title, description=description, link=link or "")

    def sitemap(
        self,
        base_url: str = "",
        changefreq: str | None = None,
        priority: float | None = None,
    ) -> str:
        """Render the newest items as a sitemap ``urlset``.

        Args:
            base_url: Site URL for relative and slug-only locations.
            changefreq: Change frequency (default from settings, "weekly").
            priority: URL priority (default from settings, 0.5).

        Returns:
            Sitemap XML text.
        """
        items = self._feed_items(self._settings.sitemap_limit)
        logger.debug("Rendering sitemap for %s with %d item(s)", self.collection_name, len(items))
        return render_sitemap(
            items,
            base_url=base_url,
            changefreq=changefreq if changefreq is not None else self._settings.sitemap_changefreq,
            priority=priority if priority is not None else self._settings.sitemap_priority,
        )

    # --- Internals ---

    def _feed_items(self, default_limit: int) -> list[TransformedItem]:
        feed = self.copy().latest()
        if feed._query.per_page <= 0:
            feed.limit(default_limit)
        return feed.all()

    def _resolve_repository(self) -> CollectionRepository:
        if self._repository is not None:
            return self._repository
        if self._repository_factory is not None:
            return self._repository_factory(self.content_path, self.repository_options)
        raise ConfigurationError(f"No repository configured for collection {self.collection_name!r}")

    def _fetch(self, page: int | None) -> RepositoryResult:
        repository = self._resolve_repository()
        q = self._query
        logger.debug(
            "Querying %s: filters=%s order_by=%s %s page=%s per_page=%s offset=%s",
            self.collection_name,
            q.filters,
            q.order_by,
            q.direction.value,
            page,
            q.per_page,
            q.offset,
        )
        result = repository.query(
            self.collection_name,
            dict(q.filters),
            q.order_by,
            q.direction,
            page,
            q.per_page,
            q.offset,
        )
        return RepositoryResult.coerce(result)

    def _transform(self, item: Any) -> TransformedItem:
        if not item:
            return TransformedItem()
        options = TransformOptions(page_path=self._query.page_path, pretty_urls=self._query.pretty_urls)
        transformed = self._transformer.transform(item, options, self.collection_name)
        if isinstance(transformed, TransformedItem):
            return transformed
        return TransformedItem.model_validate(transformed)
