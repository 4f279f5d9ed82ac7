"""Feed renderers: RSS 2.0 and sitemaps."""

from collectionspine.render.dates import format_rfc2822, format_w3c_date, parse_date
from collectionspine.render.rss import render_rss
from collectionspine.render.sitemap import render_sitemap
from collectionspine.render.urls import absolutize

__all__ = [
    "render_rss",
    "render_sitemap",
    "absolutize",
    "parse_date",
    "format_rfc2822",
    "format_w3c_date",
]
