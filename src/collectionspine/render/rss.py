"""RSS 2.0 rendering.

Example:
    >>> from datetime import UTC, datetime
    >>> from collectionspine.models.item import TransformedItem
    >>> from collectionspine.render.rss import render_rss
    >>> xml = render_rss(
    ...     [TransformedItem(title="A & B", url="posts/a", date="2024-01-15")],
    ...     title="Blog Feed",
    ...     description="RSS feed for blog",
    ...     link="https://example.com",
    ...     now=datetime(2024, 2, 1, tzinfo=UTC),
    ... )
    >>> "<title>A &amp; B</title>" in xml
    True
    >>> "<guid>https://example.com/posts/a</guid>" in xml
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from collectionspine.models.item import TransformedItem
from collectionspine.render.dates import format_rfc2822, parse_date
from collectionspine.render.urls import absolutize
from collectionspine.render.xml import XML_DECLARATION, element


def render_rss(
    items: Iterable[TransformedItem],
    *,
    title: str,
    description: str,
    link: str = "",
    now: datetime | None = None,
) -> str:
    """Serialize items as an RSS 2.0 document.

    Args:
        items: Transformed items, in feed order.
        title: Channel title.
        description: Channel description.
        link: Channel link. When non-empty it is also the base URL for
            relative item links and guids.
        now: Build time, also the fallback for undated items.

    Returns:
        RSS XML text.
    """
    now = now or datetime.now(UTC)
    base_url = link.rstrip("/") if link else ""

    lines = [
        XML_DECLARATION,
        '<rss version="2.0">',
        "<channel>",
        element("title", title),
        element("description", description),
        element("link", link),
        element("lastBuildDate", format_rfc2822(now)),
    ]
    for item in items:
        url = absolutize(item.url or "", base_url)
        lines.extend(
            [
                "<item>",
                element("title", item.title),
                element("description", item.excerpt),
                element("pubDate", format_rfc2822(parse_date(item.date, now))),
                element("link", url),
                element("guid", url),
                "</item>",
            ]
        )
    lines.extend(["</channel>", "</rss>"])
    return "\n".join(lines)
