"""WooCommerce API credentials."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from woocommerce_node.config import Settings


class WooCommerceCredentials(BaseModel):
    """
    Credentials for one WooCommerce store.

    Accepts both the host's camelCase payload
    ({url, consumerKey, consumerSecret, includeCredentialsInQuery})
    and snake_case field names. Immutable for the duration of a run.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    url: str = Field(description="Store base URL (e.g., https://mystore.com)")
    consumer_key: str = Field(description="REST API consumer key")
    consumer_secret: str = Field(repr=False, description="REST API consumer secret")
    include_credentials_in_query: bool = Field(
        default=False,
        description="Send keys as consumer_key/consumer_secret query parameters",
    )

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "WooCommerceCredentials | None":
        """Build credentials from settings, or None when any key part is missing."""
        if not (settings.store_url and settings.consumer_key and settings.consumer_secret):
            return None
        return cls(
            url=settings.store_url,
            consumer_key=settings.consumer_key,
            consumer_secret=settings.consumer_secret,
            include_credentials_in_query=settings.include_credentials_in_query,
        )
