"""Observability module for logging and execution context."""

from woocommerce_node.observability.context import (
    ItemContext,
    get_current_item,
    get_current_item_index,
    get_current_node_name,
    item_context,
)
from woocommerce_node.observability.logging import (
    LogContext,
    StructuredLogFormatter,
    configure_logging,
)

__all__ = [
    # Context
    "ItemContext",
    "get_current_item",
    "get_current_item_index",
    "get_current_node_name",
    "item_context",
    # Logging
    "LogContext",
    "configure_logging",
    "StructuredLogFormatter",
]
