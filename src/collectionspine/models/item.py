"""Template-ready item model.

Example:
    >>> from datetime import datetime
    >>> from collectionspine.models.item import TransformedItem
    >>> item = TransformedItem(title="Hello", slug="hello", author="ada")
    >>> item.url is None
    True
    >>> item.author
    'ada'
    >>> TransformedItem(date=datetime(2024, 1, 1), title=42).date
    '2024-01-01T00:00:00'
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from collectionspine.models.base import CollectionSpineModel


class TransformedItem(CollectionSpineModel):
    """Normalized view of a raw content item.

    The six feed fields are optional strings; other values given for them
    are converted (dates to ISO-8601, anything else with ``str``). Any extra
    keys produced by a transformer (author, tags, image...) are kept as
    attributes so templates can read them.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = Field(default=None)
    excerpt: str | None = Field(default=None)
    url: str | None = Field(default=None)
    slug: str | None = Field(default=None)
    date: str | None = Field(default=None, description="Publication date")
    date_modified: str | None = Field(default=None, description="Last modification date")

    @field_validator("title", "excerpt", "url", "slug", "date", "date_modified", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Any:
        """Stringify non-text values so odd transformer output still renders."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, date):
            return v.isoformat()
        return str(v)


class TransformOptions(CollectionSpineModel):
    """URL options passed to transformers."""

    page_path: str | None = None
    pretty_urls: bool = False
