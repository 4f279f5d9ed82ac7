"""Custom exceptions.

Data problems never raise: missing metadata, missing fields and bad dates
degrade to defaults. These exceptions cover misconfiguration and the
reference repository's loading step.

Example:
    >>> from collectionspine.core.exceptions import RepositoryError, CollectionSpineError
    >>> isinstance(RepositoryError("bad file"), CollectionSpineError)
    True
"""

from __future__ import annotations


class CollectionSpineError(Exception):
    """Base exception for CollectionSpine.

    Example:
        >>> from collectionspine.core.exceptions import CollectionSpineError
        >>> str(CollectionSpineError("something went wrong"))
        'something went wrong'
    """


class ConfigurationError(CollectionSpineError):
    """Configuration is invalid.

    Example:
        >>> from collectionspine.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("no repository")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: no repository
    """


class RepositoryError(CollectionSpineError):
    """Repository could not load or serve content."""
