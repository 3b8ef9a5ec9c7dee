"""Resource handlers, keyed by resource name then operation name."""

from woocommerce_node.resources import custom, customer, order, product
from woocommerce_node.resources.common import OperationHandler

RESOURCES: dict[str, dict[str, OperationHandler]] = {
    "customer": customer.OPERATIONS,
    "product": product.OPERATIONS,
    "order": order.OPERATIONS,
    "custom": custom.OPERATIONS,
}

__all__ = [
    "OperationHandler",
    "RESOURCES",
]
