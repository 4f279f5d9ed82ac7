"""Relative-to-absolute URL rewriting for feeds.

Example:
    >>> from collectionspine.render.urls import absolutize
    >>> absolutize("../posts/a", "https://example.com/")
    'https://example.com/posts/a'
    >>> absolutize("HTTPS://other.com/x", "https://example.com")
    'HTTPS://other.com/x'
    >>> absolutize("posts/a", "")
    'posts/a'
"""

from __future__ import annotations

_RELATIVE_PREFIXES = ("./", "../")


def strip_relative_prefix(path: str) -> str:
    """Remove any run of leading ``./`` and ``../`` segments."""
    while path.startswith(_RELATIVE_PREFIXES):
        path = path[3:] if path.startswith("../") else path[2:]
    return path


def is_absolute(path: str) -> bool:
    """True when ``path`` already carries an http(s) scheme."""
    return path[:4].lower() == "http"


def absolutize(path: str, base_url: str) -> str:
    """Prefix ``path`` with ``base_url`` unless it is already absolute.

    Args:
        path: URL or path taken from an item.
        base_url: Site URL. Empty disables rewriting.

    Returns:
        The rewritten URL. An empty path resolves to the site root.
    """
    if not base_url:
        return path
    cleaned = strip_relative_prefix(path.strip())
    if is_absolute(cleaned):
        return cleaned
    return f"{base_url.rstrip('/')}/{cleaned.lstrip('/')}"
