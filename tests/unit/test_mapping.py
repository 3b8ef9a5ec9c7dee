"""Unit tests for WooCommerce payload mapping."""

import copy

import pytest

from woocommerce_node.integrations.woocommerce.mapping import (
    NO_VALUE,
    adjust_metadata,
    parse_name_value_array,
    set_fields,
    set_metadata,
    snake_case,
    to_id_list,
    to_snake_case,
    validate_json,
)


class TestSnakeCase:
    """Tests for field name conversion."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("taxClass", "tax_class"),
            ("firstName", "first_name"),
            ("transactionID", "transaction_id"),
            ("metadataUi", "metadata_ui"),
            ("HTMLParser", "html_parser"),
            ("productID", "product_id"),
            ("address1", "address1"),
            ("address_1", "address_1"),
            ("tax_class", "tax_class"),
            ("email", "email"),
        ],
    )
    def test_snake_case(self, name, expected):
        """Test camelCase and snake_case inputs."""
        assert snake_case(name) == expected


class TestToSnakeCase:
    """Tests for in-place key normalization."""

    def test_single_record(self):
        """Test a mapping is normalized in place."""
        record = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com"}
        to_snake_case(record)
        assert record == {"first_name": "Jane", "last_name": "Doe", "email": "jane@example.com"}

    def test_list_of_records(self):
        """Test each record of a list is normalized."""
        records = [{"productId": 1}, {"productId": 2, "variationId": 5}]
        to_snake_case(records)
        assert records == [{"product_id": 1}, {"product_id": 2, "variation_id": 5}]

    def test_collision_removes_original_key(self):
        """Test the renamed value overwrites an existing key and the original is removed."""
        record = {"tax_class": "old", "taxClass": "new"}
        to_snake_case(record)
        assert record == {"tax_class": "new"}

    def test_idempotent(self):
        """Test normalizing twice equals normalizing once."""
        record = {"totalTax": "1.00", "methodTitle": "Flat", "meta_data": []}
        to_snake_case(record)
        once = copy.deepcopy(record)
        to_snake_case(record)
        assert record == once

    def test_empty_list(self):
        """Test an empty list is accepted."""
        records: list = []
        to_snake_case(records)
        assert records == []


class TestSetFields:
    """Tests for copying UI fields into a body."""

    def test_fields_are_snake_cased(self):
        """Test field names are converted."""
        body: dict = {}
        set_fields({"regularPrice": "9.99", "taxClass": "standard"}, body)
        assert body == {"regular_price": "9.99", "tax_class": "standard"}

    def test_tags_become_id_objects(self):
        """Test tag ids are expanded."""
        body: dict = {}
        set_fields({"tags": ["3", 4]}, body)
        assert body == {"tags": [{"id": 3}, {"id": 4}]}

    def test_to_id_list(self):
        """Test id list conversion."""
        assert to_id_list(["12", "7"]) == [{"id": 12}, {"id": 7}]


class TestSetMetadata:
    """Tests for moving line item metadata."""

    def test_metadata_values_moved(self):
        """Test metadataUi rows become meta_data."""
        rows = [{"key": "gift", "value": "yes"}]
        items = [{"name": "Fee", "metadataUi": {"metadataValues": rows}}]
        set_metadata(items)
        assert items == [{"name": "Fee", "meta_data": rows}]

    def test_empty_wrapper_removed(self):
        """Test an empty wrapper is dropped without creating meta_data."""
        items = [{"code": "SPRING", "metadataUi": {}}]
        set_metadata(items)
        assert items == [{"code": "SPRING"}]

    def test_no_wrapper_is_noop(self):
        """Test items without metadata are untouched."""
        items = [{"code": "SPRING", "meta_data": [{"key": "a", "value": "b"}]}]
        expected = copy.deepcopy(items)
        set_metadata(items)
        assert items == expected


class TestAdjustMetadata:
    """Tests for unwrapping customer metadata."""

    def test_unwrap_meta_data_fields(self):
        """Test meta_data_fields become the plain meta_data list."""
        rows = [{"key": "tier", "value": "gold"}]
        fields = {"first_name": "Jane", "meta_data": {"meta_data_fields": rows}}
        adjusted = adjust_metadata(fields)
        assert adjusted == {"first_name": "Jane", "meta_data": rows}
        # Input is left alone
        assert fields["meta_data"] == {"meta_data_fields": rows}

    def test_without_metadata_returns_same_record(self):
        """Test records without meta_data come back unchanged."""
        fields = {"first_name": "Jane"}
        assert adjust_metadata(fields) is fields

    def test_already_plain_list(self):
        """Test an already adjusted record is unchanged."""
        fields = {"meta_data": [{"key": "a", "value": "b"}]}
        assert adjust_metadata(fields) is fields

    def test_wrapper_without_rows(self):
        """Test a wrapper without rows drops meta_data."""
        assert adjust_metadata({"email": "a@b.c", "meta_data": {"other": 1}}) == {"email": "a@b.c"}


class TestValidateJson:
    """Tests for tolerant JSON parsing."""

    def test_valid_object(self):
        """Test a valid object is parsed."""
        assert validate_json('{"a":1}') == {"a": 1}

    def test_invalid_returns_no_value(self):
        """Test malformed text returns the sentinel."""
        assert validate_json("{bad") is NO_VALUE

    def test_none_returns_no_value(self):
        """Test missing text returns the sentinel."""
        assert validate_json(None) is NO_VALUE

    def test_json_null_is_a_value(self):
        """Test JSON null is distinct from the sentinel."""
        assert validate_json("null") is None

    def test_sentinel_is_falsy(self):
        """Test the sentinel reads as falsy."""
        assert not NO_VALUE


class TestParseNameValueArray:
    """Tests for name/value row parsing."""

    def test_rows_to_mapping(self):
        """Test rows become a mapping."""
        rows = [{"name": "a", "value": "1"}, {"name": "b", "value": "2"}]
        assert parse_name_value_array(rows) == {"a": "1", "b": "2"}

    def test_incomplete_rows_skipped(self):
        """Test rows missing name or value are ignored."""
        rows = [{"name": "a"}, {"value": "2"}, {"name": "c", "value": "3"}]
        assert parse_name_value_array(rows) == {"c": "3"}

    def test_last_write_wins(self):
        """Test later duplicates override earlier rows."""
        rows = [{"name": "a", "value": "1"}, {"name": "a", "value": "2"}]
        assert parse_name_value_array(rows) == {"a": "2"}

    def test_none(self):
        """Test None gives an empty mapping."""
        assert parse_name_value_array(None) == {}
