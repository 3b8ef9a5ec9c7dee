"""Field name and structure mapping for WooCommerce payloads."""

import json
import re
from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any

# Word boundaries: "taxClass" -> "tax Class", "HTMLParser" -> "HTML Parser"
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_UPPER_UPPER_LOWER = re.compile(r"([A-Z])([A-Z][a-z])")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")

# UI wrapper holding line item metadata rows
METADATA_UI_KEY = "metadataUi"
METADATA_VALUES_KEY = "metadataValues"


class _NoValue(Enum):
    NO_VALUE = "NO_VALUE"

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


# Returned by validate_json when the text is not valid JSON
NO_VALUE = _NoValue.NO_VALUE


def snake_case(name: str) -> str:
    """
    Convert a field name to snake_case.

    Args:
        name: Field name in camelCase, PascalCase or already snake_case.

    Returns:
        The snake_case name (e.g., "taxClass" -> "tax_class", "transactionID" -> "transaction_id").
    """
    spaced = _LOWER_UPPER.sub(r"\1 \2", name)
    spaced = _UPPER_UPPER_LOWER.sub(r"\1 \2", spaced)
    words = _NON_ALPHANUMERIC.sub(" ", spaced).split()
    return "_".join(word.lower() for word in words)


def to_snake_case(data: MutableMapping[str, Any] | Sequence[MutableMapping[str, Any]]) -> None:
    """
    Rewrite the keys of a record (or of each record in a list) to snake_case in place.

    The original key is removed once its value has been moved. When the
    snake_case key already exists the moved value overwrites it. Keys are
    snapshotted first, so a key created by a rename is never renamed again.

    Args:
        data: A mapping or a sequence of mappings to normalize.
    """
    records = [data] if isinstance(data, Mapping) else data
    for record in records:
        for key in list(record.keys()):
            target = snake_case(key)
            if target == key:
                continue
            record[target] = record.pop(key)


def set_fields(fields_to_set: Mapping[str, Any], body: MutableMapping[str, Any]) -> None:
    """
    Copy UI fields into a request body under their snake_case names.

    Tag ids are expanded to WooCommerce's [{"id": n}] shape.

    Args:
        fields_to_set: Fields collected from the node parameters.
        body: Request body to update in place.
    """
    for name, value in fields_to_set.items():
        if name == "tags":
            body["tags"] = to_id_list(value)
        else:
            body[snake_case(name)] = value


def to_id_list(ids: Sequence[Any]) -> list[dict[str, int]]:
    """Convert ["12", 7] into [{"id": 12}, {"id": 7}]."""
    return [{"id": int(value)} for value in ids]


def set_metadata(items: Sequence[MutableMapping[str, Any]]) -> None:
    """
    Move each item's metadataUi.metadataValues rows to a meta_data field.

    The metadataUi wrapper is always removed; items without metadata rows get
    no meta_data field.

    Args:
        items: Line items (shipping, fee, coupon or product lines), updated in place.
    """
    for item in items:
        wrapper = item.pop(METADATA_UI_KEY, None)
        if isinstance(wrapper, Mapping) and wrapper.get(METADATA_VALUES_KEY) is not None:
            item["meta_data"] = wrapper[METADATA_VALUES_KEY]


def adjust_metadata(fields: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Unwrap customer metadata collected as {"meta_data_fields": [...]}.

    Args:
        fields: Customer fields from the node parameters.

    Returns:
        The fields unchanged when there is no wrapped meta_data, otherwise a
        new mapping whose meta_data is the plain list of {key, value} rows.
    """
    meta = fields.get("meta_data")
    if not meta or not isinstance(meta, Mapping):
        return fields

    adjusted = {key: value for key, value in fields.items() if key != "meta_data"}
    if meta.get("meta_data_fields") is not None:
        adjusted["meta_data"] = meta["meta_data_fields"]
    return adjusted


def validate_json(text: str | None) -> Any:
    """
    Parse JSON text without raising.

    Args:
        text: JSON text from a node parameter.

    Returns:
        The parsed value, or NO_VALUE when the text is missing or malformed.
    """
    if text is None:
        return NO_VALUE
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return NO_VALUE


def parse_name_value_array(rows: Sequence[Mapping[str, Any]] | None) -> dict[str, Any]:
    """
    Build a mapping from UI name/value rows.

    Rows missing a name or a value are skipped; later rows win on duplicate names.

    Args:
        rows: Rows like [{"name": "status", "value": "publish"}], or None.

    Returns:
        Mapping of name to value.
    """
    result: dict[str, Any] = {}
    for row in rows or []:
        name = row.get("name")
        value = row.get("value")
        if name and value:
            result[name] = value
    return result
