"""Small helpers for line-oriented XML output."""

from __future__ import annotations

from xml.sax.saxutils import escape as _escape

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_ENTITIES = {'"': "&quot;", "'": "&#039;"}


def escape(text: object) -> str:
    """Escape text content; ``None`` becomes the empty string."""
    if text is None:
        return ""
    return _escape(str(text), _ENTITIES)


def element(tag: str, text: object) -> str:
    """Render ``<tag>text</tag>`` with escaped text."""
    return f"<{tag}>{escape(text)}</{tag}>"
