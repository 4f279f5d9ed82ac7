"""Transformer protocol.

A transformer turns one raw repository item into a ``TransformedItem``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collectionspine.models.item import TransformedItem, TransformOptions


@runtime_checkable
class ItemTransformer(Protocol):
    """Item transformer protocol.

    See Also:
        collectionspine.transformer.DefaultTransformer: Reference implementation
    """

    def transform(
        self,
        item: Any,
        options: TransformOptions,
        collection: str,
    ) -> TransformedItem | Mapping[str, Any]:
        """Normalize ``item`` for templates and feeds."""
        ...
