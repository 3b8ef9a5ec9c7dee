"""Platform integrations."""

from woocommerce_node.integrations.woocommerce import HttpTransport, WooCommerceClient

__all__ = [
    "HttpTransport",
    "WooCommerceClient",
]
