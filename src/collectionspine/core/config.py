"""CollectionSpine configuration.

Application settings loaded from environment variables with the
COLLECTIONSPINE_ prefix.

Example:
    >>> from collectionspine.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.rss_limit
    20
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with COLLECTIONSPINE_ prefix.

    Example:
        >>> from collectionspine.core.config import Settings
        >>> s = Settings(default_per_page=25)
        >>> s.default_per_page
        25
        >>> s.sitemap_limit
        1000
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLECTIONSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Query defaults
    default_per_page: int = Field(default=10, ge=1, description="Items per page for new builders")
    default_order_by: str = Field(default="date_published", description="Sort field for new builders")
    default_direction: Literal["asc", "desc"] = Field(default="desc")

    # Feeds
    rss_limit: int = Field(default=20, ge=1, description="RSS item count when per_page is unset")
    sitemap_limit: int = Field(default=1000, ge=1, description="Sitemap URL count when per_page is unset")
    sitemap_changefreq: str = Field(default="weekly")
    sitemap_priority: float = Field(default=0.5, ge=0.0, le=1.0)

    # URL generation
    page_path: str | None = Field(default=None, description="Detail page path used to build item URLs")
    pretty_urls: bool = Field(default=False)


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from collectionspine.core.config import get_settings
        >>> get_settings(pretty_urls=True).pretty_urls
        True
    """
    return Settings(**overrides)
