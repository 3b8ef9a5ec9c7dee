"""Unit tests for structured logging and item correlation."""

import json
import logging

from woocommerce_node.observability.context import (
    get_current_item,
    get_current_item_index,
    get_current_node_name,
    item_context,
)
from woocommerce_node.observability.logging import (
    ItemContextFilter,
    LogContext,
    StructuredLogFormatter,
)


def make_record(message: str = "hello") -> logging.LogRecord:
    return logging.getLogger("woocommerce_node.test").makeRecord(
        "woocommerce_node.test", logging.INFO, __file__, 10, message, (), None
    )


class TestItemContext:
    """Tests for item context propagation."""

    def test_scoped(self):
        """Test the context is set inside the block only."""
        with item_context("Shop", 2, "order", "create") as item:
            assert get_current_item() is item
            assert get_current_item_index() == 2
            assert get_current_node_name() == "Shop"

        assert get_current_item() is None
        assert get_current_item_index() is None

    def test_nested_restores_outer(self):
        """Test leaving an inner block restores the outer item."""
        with item_context("Shop", 0):
            with item_context("Shop", 1):
                assert get_current_item_index() == 1
            assert get_current_item_index() == 0


class TestStructuredLogFormatter:
    """Tests for JSON log output."""

    def test_item_fields_included(self):
        """Test records inside an item carry node and item index."""
        formatter = StructuredLogFormatter()

        with item_context("Shop", 3, "product", "update"):
            entry = json.loads(formatter.format(make_record()))

        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["node"] == "Shop"
        assert entry["item_index"] == 3
        assert entry["resource"] == "product"
        assert entry["operation"] == "update"

    def test_outside_item(self):
        """Test records outside an item omit correlation fields."""
        entry = json.loads(StructuredLogFormatter().format(make_record()))

        assert "node" not in entry
        assert "item_index" not in entry

    def test_extra_fields(self):
        """Test LogContext fields are emitted under extra."""
        formatter = StructuredLogFormatter()

        with LogContext(endpoint="/orders"):
            with LogContext(page=2):
                inner = json.loads(formatter.format(make_record()))
        after = json.loads(formatter.format(make_record()))

        assert inner["extra"] == {"endpoint": "/orders", "page": 2}
        assert "extra" not in after


class TestItemContextFilter:
    """Tests for plain-text correlation fields."""

    def test_fills_placeholders(self):
        """Test records get node and item index attributes."""
        record = make_record()
        with item_context("Shop", 5):
            assert ItemContextFilter().filter(record)

        assert record.node == "Shop"
        assert record.item_index == 5

    def test_defaults_outside_item(self):
        """Test placeholders are filled with dashes outside an item."""
        record = make_record()
        ItemContextFilter().filter(record)

        assert record.node == "-"
        assert record.item_index == "-"
