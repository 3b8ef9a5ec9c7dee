"""Execution context propagation using contextvars."""

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True)
class ItemContext:
    """Identifies the node run and input item currently being processed."""

    node_name: str
    item_index: int
    resource: str | None = None
    operation: str | None = None


# Context variable for the item being processed
_current_item: ContextVar[ItemContext | None] = ContextVar("current_item", default=None)


def get_current_item() -> ItemContext | None:
    """
    Get the current item context.

    Returns:
        The current ItemContext, or None if not set.
    """
    return _current_item.get()


def get_current_item_index() -> int | None:
    """Get the index of the input item being processed, if any."""
    item = _current_item.get()
    return item.item_index if item else None


def get_current_node_name() -> str | None:
    """Get the name of the node being executed, if any."""
    item = _current_item.get()
    return item.node_name if item else None


@contextmanager
def item_context(
    node_name: str,
    item_index: int,
    resource: str | None = None,
    operation: str | None = None,
) -> Generator[ItemContext, None, None]:
    """
    Context manager scoping log correlation to one input item.

    Usage:
        with item_context("WooCommerce", 3, "order", "create"):
            logger.info("Creating order")  # carries node and item index

    Yields:
        The item context.
    """
    item = ItemContext(
        node_name=node_name,
        item_index=item_index,
        resource=resource,
        operation=operation,
    )
    token = _current_item.set(item)
    try:
        yield item
    finally:
        _current_item.reset(token)
