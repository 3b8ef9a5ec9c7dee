"""WooCommerce REST API integration."""

from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import (
    NO_VALUE,
    adjust_metadata,
    parse_name_value_array,
    set_fields,
    set_metadata,
    snake_case,
    to_snake_case,
    validate_json,
)
from woocommerce_node.integrations.woocommerce.transport import HttpTransport
from woocommerce_node.integrations.woocommerce.webhooks import (
    get_automatic_secret,
    verify_webhook_signature,
)

__all__ = [
    "HttpTransport",
    "WooCommerceClient",
    "NO_VALUE",
    "adjust_metadata",
    "get_automatic_secret",
    "parse_name_value_array",
    "set_fields",
    "set_metadata",
    "snake_case",
    "to_snake_case",
    "validate_json",
    "verify_webhook_signature",
]
