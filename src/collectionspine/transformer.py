"""Default item transformer.

Maps raw repository items (plain mappings) onto ``TransformedItem`` and
builds detail-page URLs from the builder's URL options.

Example:
    >>> from collectionspine.models.item import TransformOptions
    >>> from collectionspine.transformer import DefaultTransformer
    >>> t = DefaultTransformer()
    >>> item = t.transform(
    ...     {"slug": "hello", "title": "Hello"},
    ...     TransformOptions(page_path="posts", pretty_urls=True),
    ...     "blog",
    ... )
    >>> item.url
    'posts/hello'
    >>> t.transform({"slug": "hello"}, TransformOptions(page_path="post.php"), "blog").url
    'post.php?item=hello'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Any

from collectionspine.models.item import TransformedItem, TransformOptions

EXCERPT_LENGTH = 160

_WHITESPACE = re.compile(r"\s+")

# Raw keys consumed into the standard fields
_CONSUMED = frozenset(
    {
        "title",
        "excerpt",
        "url",
        "slug",
        "id",
        "file",
        "path",
        "body",
        "content",
        "date",
        "date_published",
        "date_modified",
        "updated",
    }
)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


def make_excerpt(body: str, length: int = EXCERPT_LENGTH) -> str:
    """Collapse whitespace and cut ``body`` to ``length`` characters.

    Example:
        >>> make_excerpt("one   two\\nthree", length=7)
        'one two...'
    """
    text = _WHITESPACE.sub(" ", body).strip()
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."


def item_url(slug: str | None, options: TransformOptions) -> str | None:
    """Build the detail URL for ``slug``, or None without a page path."""
    if not slug or not options.page_path:
        return None
    page_path = options.page_path.rstrip("/")
    if options.pretty_urls:
        return f"{page_path}/{slug}"
    return f"{page_path}?item={slug}"


class DefaultTransformer:
    """Transformer for mapping-shaped raw items.

    Extra raw keys (author, tags, image...) pass through as extra fields.
    """

    def transform(self, item: Any, options: TransformOptions, collection: str) -> TransformedItem:
        if not item:
            return TransformedItem()
        if not isinstance(item, Mapping):
            return TransformedItem.model_validate(item)

        slug = _first(item, "slug", "id")
        if slug is None:
            source = _first(item, "file", "path")
            slug = PurePosixPath(str(source)).stem if source else None
        slug = _text(slug)

        excerpt = _first(item, "excerpt")
        if excerpt is None:
            body = _first(item, "body", "content")
            excerpt = make_excerpt(str(body)) if body is not None else None

        url = _first(item, "url")
        extra = {k: v for k, v in item.items() if k not in _CONSUMED}

        return TransformedItem(
            title=_text(_first(item, "title")),
            excerpt=_text(excerpt),
            url=_text(url) if url is not None else item_url(slug, options),
            slug=slug,
            date=_text(_first(item, "date_published", "date")),
            date_modified=_text(_first(item, "date_modified", "updated")),
            **extra,
        )
