"""WooCommerce workflow node: REST API requests, pagination and payload shaping."""

from woocommerce_node.config import Settings, get_settings
from woocommerce_node.exceptions import NodeApiError, NodeOperationError, WooCommerceNodeError
from woocommerce_node.host import LocalExecutionContext, NodeExecutionContext
from woocommerce_node.models import WooCommerceCredentials
from woocommerce_node.node import WooCommerceNode

__version__ = "0.1.0"

__all__ = [
    "LocalExecutionContext",
    "NodeApiError",
    "NodeExecutionContext",
    "NodeOperationError",
    "Settings",
    "WooCommerceCredentials",
    "WooCommerceNode",
    "WooCommerceNodeError",
    "get_settings",
]
