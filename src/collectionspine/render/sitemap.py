"""Sitemap (sitemaps.org 0.9) rendering."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from collectionspine.models.item import TransformedItem
from collectionspine.render.dates import format_w3c_date, parse_date
from collectionspine.render.urls import absolutize
from collectionspine.render.xml import XML_DECLARATION, element

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def format_priority(priority: float) -> str:
    """Format a priority without trailing zeros.

    Example:
        >>> format_priority(0.5), format_priority(1.0), format_priority(0.75)
        ('0.5', '1', '0.75')
    """
    return format(priority, "g")


def render_sitemap(
    items: Iterable[TransformedItem],
    *,
    base_url: str = "",
    changefreq: str = "weekly",
    priority: float = 0.5,
    now: datetime | None = None,
) -> str:
    """Serialize items as a ``urlset`` document.

    Items without a url get ``base_url + "/" + slug``. Relative locations
    are made absolute when ``base_url`` is set.

    Example:
        >>> from collectionspine.models.item import TransformedItem
        >>> xml = render_sitemap([TransformedItem(slug="a")], base_url="https://example.com")
        >>> "<loc>https://example.com/a</loc>" in xml
        True
    """
    now = now or datetime.now(UTC)
    base_url = base_url.rstrip("/") if base_url else ""

    lines = [XML_DECLARATION, f'<urlset xmlns="{SITEMAP_NS}">']
    for item in items:
        loc = item.url if item.url is not None else f"{base_url}/{item.slug or ''}"
        lastmod = parse_date(item.date_modified or item.date, now)
        lines.extend(
            [
                "<url>",
                element("loc", absolutize(loc, base_url)),
                element("lastmod", format_w3c_date(lastmod)),
                element("changefreq", changefreq),
                element("priority", format_priority(priority)),
                "</url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines)
