"""Tests for collectionspine.core.exceptions."""

from __future__ import annotations

import pytest

from collectionspine.core.exceptions import (
    CollectionSpineError,
    ConfigurationError,
    RepositoryError,
)


@pytest.mark.parametrize("exc_type", [ConfigurationError, RepositoryError])
def test_hierarchy(exc_type: type[Exception]) -> None:
    """All errors derive from CollectionSpineError."""
    with pytest.raises(CollectionSpineError, match="boom"):
        raise exc_type("boom")
