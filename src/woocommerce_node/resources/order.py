"""Order operations.

https://woocommerce.github.io/woocommerce-rest-api-docs/#orders
"""

from collections.abc import Callable
from typing import Any

from woocommerce_node.exceptions import NodeOperationError
from woocommerce_node.host import NodeExecutionContext
from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import (
    set_fields,
    set_metadata,
    to_snake_case,
)
from woocommerce_node.models.parameters import (
    JsonLineItems,
    StructuredLineItems,
    line_items_adapter,
)
from woocommerce_node.resources.common import (
    OperationHandler,
    apply_options,
    convert_field,
    get_all,
    get_ui_values,
    parse_json_parameter,
)

# Addresses: (UI collection, values key, body field)
ADDRESS_COLLECTIONS = (
    ("billingUi", "billingValues", "billing"),
    ("shippingUi", "shippingValues", "shipping"),
)

# Metadata-bearing lines other than product line items, in body order
LINE_COLLECTIONS = (
    ("couponLinesUi", "couponLinesValues", "coupon_lines"),
    ("feeLinesUi", "feeLinesValues", "fee_lines"),
)

# Explicit update fields: UI name -> (body field, converter)
UPDATE_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "currency": ("currency", str),
    "customerId": ("customer_id", int),
    "customerNote": ("customer_note", str),
    "parentId": ("parent_id", int),
    "paymentMethodId": ("payment_method", str),
    "paymentMethodTitle": ("payment_method_title", str),
    "status": ("status", str),
    "transactionID": ("transaction_id", str),
}

LIST_OPTIONS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "after": ("after", str),
    "before": ("before", str),
    "category": ("category", str),
    "customer": ("customer", int),
    "decimalPoints": ("dp", int),
    "product": ("product", int),
    "order": ("order", str),
    "orderBy": ("orderby", str),
    "search": ("search", str),
    "status": ("status", str),
}


def resolve_line_items(
    context: NodeExecutionContext, i: int
) -> JsonLineItems | StructuredLineItems:
    """Pick the line items input variant from the jsonParameterLineItems toggle."""
    if context.get_node_parameter("jsonParameterLineItems", i, False):
        return line_items_adapter.validate_python(
            {"kind": "json", "raw": context.get_node_parameter("lineItemsJson", i, "")}
        )
    return line_items_adapter.validate_python(
        {"kind": "fields", "items": get_ui_values(context, "lineItemsUi", "lineItemsValues", i)}
    )


def line_items_payload(
    context: NodeExecutionContext,
    line_items: JsonLineItems | StructuredLineItems,
) -> list[dict[str, Any]] | None:
    """
    Turn a line items input into the body's line_items value.

    JSON input is sent as written; UI rows get their metadata moved to
    meta_data and their keys snake_cased.

    Raises:
        NodeOperationError: If JSON input is malformed or not an array of objects.
    """
    if isinstance(line_items, JsonLineItems):
        if line_items.raw == "":
            return None
        parsed = parse_json_parameter(context, line_items.raw, "Line Items")
        if isinstance(parsed, dict):
            parsed = [parsed]
        if not isinstance(parsed, list) or not all(isinstance(item, dict) for item in parsed):
            raise NodeOperationError(
                "Line Items must be a JSON array of objects",
                node_name=context.node_name,
            )
        return parsed

    if not line_items.items:
        return None
    set_metadata(line_items.items)
    to_snake_case(line_items.items)
    return line_items.items


def _set_order_collections(client: WooCommerceClient, body: dict[str, Any], i: int) -> None:
    """Fill addresses, lines and metadata shared by create and update."""
    context = client.context

    for ui_name, values_name, field in ADDRESS_COLLECTIONS:
        address = get_ui_values(context, ui_name, values_name, i)
        if address is not None:
            to_snake_case(address)
            body[field] = address

    for ui_name, values_name, field in LINE_COLLECTIONS:
        lines = get_ui_values(context, ui_name, values_name, i)
        if lines:
            set_metadata(lines)
            to_snake_case(lines)
            body[field] = lines

    line_items = line_items_payload(context, resolve_line_items(context, i))
    if line_items is not None:
        body["line_items"] = line_items

    metadata = get_ui_values(context, "metadataUi", "metadataValues", i)
    if metadata:
        body["meta_data"] = metadata

    shipping_lines = get_ui_values(context, "shippingLinesUi", "shippingLinesValues", i)
    if shipping_lines:
        set_metadata(shipping_lines)
        to_snake_case(shipping_lines)
        body["shipping_lines"] = shipping_lines


async def create(client: WooCommerceClient, i: int) -> Any:
    additional_fields = client.context.get_node_parameter("additionalFields", i, {})
    body: dict[str, Any] = {}

    set_fields(additional_fields, body)
    _set_order_collections(client, body, i)

    return await client.api_request("POST", "/orders", body)


async def update(client: WooCommerceClient, i: int) -> Any:
    context = client.context
    order_id = context.get_node_parameter("orderId", i)
    update_fields = context.get_node_parameter("updateFields", i, {})
    body: dict[str, Any] = {}

    for name, (field, convert) in UPDATE_FIELDS.items():
        if update_fields.get(name):
            body[field] = convert_field(context, name, convert, update_fields[name])

    _set_order_collections(client, body, i)
    return await client.api_request("PUT", f"/orders/{order_id}", body)


async def get(client: WooCommerceClient, i: int) -> Any:
    order_id = client.context.get_node_parameter("orderId", i)
    return await client.api_request("GET", f"/orders/{order_id}")


async def get_many(client: WooCommerceClient, i: int) -> Any:
    options = client.context.get_node_parameter("options", i, {})
    qs = apply_options(client.context, options or {}, LIST_OPTIONS)
    return await get_all(client, "/orders", qs, i)


async def delete(client: WooCommerceClient, i: int) -> Any:
    order_id = client.context.get_node_parameter("orderId", i)
    return await client.api_request("DELETE", f"/orders/{order_id}", {}, {"force": True})


OPERATIONS: dict[str, OperationHandler] = {
    "create": create,
    "delete": delete,
    "get": get,
    "getAll": get_many,
    "update": update,
}
