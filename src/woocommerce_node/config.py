"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Node settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WOOCOMMERCE_NODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # WooCommerce credentials (used when the host does not supply its own)
    store_url: str = Field(
        default="",
        description="WooCommerce store URL (e.g., https://mystore.com)",
    )
    consumer_key: str = Field(
        default="",
        description="WooCommerce REST API consumer key",
    )
    consumer_secret: str = Field(
        default="",
        description="WooCommerce REST API consumer secret",
    )
    include_credentials_in_query: bool = Field(
        default=False,
        description="Send consumer key/secret as query parameters instead of Basic Auth",
    )

    # API
    api_version: str = Field(
        default="wc/v3",
        description="WooCommerce REST API namespace under /wp-json",
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds for each request",
    )

    # Pagination
    per_page: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Page size used when returning all records",
    )
    max_pages: int = Field(
        default=1000,
        ge=0,
        description="Hard ceiling on pages fetched per collection (0 = unbounded)",
    )

    # Execution
    item_concurrency: int = Field(
        default=1,
        ge=1,
        description="Input items processed concurrently (1 = strictly sequential)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
