"""Core configuration and exceptions."""

from collectionspine.core.config import Settings, get_settings
from collectionspine.core.exceptions import (
    CollectionSpineError,
    ConfigurationError,
    RepositoryError,
)

__all__ = [
    "Settings",
    "get_settings",
    "CollectionSpineError",
    "ConfigurationError",
    "RepositoryError",
]
