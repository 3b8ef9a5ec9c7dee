"""Product operations.

https://woocommerce.github.io/woocommerce-rest-api-docs/#products
"""

from collections.abc import Callable
from typing import Any

from woocommerce_node.host import NodeExecutionContext
from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import set_fields, to_id_list
from woocommerce_node.resources.common import (
    OperationHandler,
    apply_options,
    convert_field,
    get_all,
    get_ui_values,
)

# getAll option -> (query key, converter). minPrice shares max_price with
# maxPrice and, being later in the table, wins when both are set.
LIST_OPTIONS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "after": ("after", str),
    "before": ("before", str),
    "category": ("category", str),
    "context": ("context", str),
    "featured": ("featured", bool),
    "maxPrice": ("max_price", str),
    "minPrice": ("max_price", str),
    "order": ("order", str),
    "orderBy": ("orderby", str),
    "search": ("search", str),
    "sku": ("sku", str),
    "slug": ("slug", str),
    "status": ("status", str),
    "stockStatus": ("stock_status", str),
    "tag": ("tag", str),
    "taxClass": ("tax_class", str),
    "type": ("type", str),
}


def _set_product_fields(
    context: NodeExecutionContext,
    fields: dict[str, Any],
    body: dict[str, Any],
) -> None:
    """Copy additional or update fields; tag and category ids become id objects."""
    id_lists = {
        name: convert_field(context, name, to_id_list, fields[name])
        for name in ("tags", "categories")
        if fields.get(name)
    }
    set_fields({k: v for k, v in fields.items() if k not in id_lists}, body)
    body.update(id_lists)


def _set_ui_collections(client: WooCommerceClient, body: dict[str, Any], i: int) -> None:
    """Copy images, dimensions and metadata rows from their UI collections."""
    context = client.context

    images = get_ui_values(context, "imagesUi", "imagesValues", i)
    if images:
        body["images"] = images

    dimensions = get_ui_values(context, "dimensionsUi", "dimensionsValues", i)
    if dimensions:
        body["dimensions"] = dimensions

    metadata = get_ui_values(context, "metadataUi", "metadataValues", i)
    if metadata:
        body["meta_data"] = metadata


async def create(client: WooCommerceClient, i: int) -> Any:
    context = client.context
    additional_fields = context.get_node_parameter("additionalFields", i, {})
    body: dict[str, Any] = {"name": context.get_node_parameter("name", i)}

    _set_product_fields(context, additional_fields, body)
    _set_ui_collections(client, body, i)
    return await client.api_request("POST", "/products", body)


async def update(client: WooCommerceClient, i: int) -> Any:
    context = client.context
    product_id = context.get_node_parameter("productId", i)
    update_fields = context.get_node_parameter("updateFields", i, {})
    body: dict[str, Any] = {}

    _set_product_fields(context, update_fields, body)
    _set_ui_collections(client, body, i)
    return await client.api_request("PUT", f"/products/{product_id}", body)


async def get(client: WooCommerceClient, i: int) -> Any:
    product_id = client.context.get_node_parameter("productId", i)
    return await client.api_request("GET", f"/products/{product_id}")


async def get_many(client: WooCommerceClient, i: int) -> Any:
    options = client.context.get_node_parameter("options", i, {})
    qs = apply_options(client.context, options or {}, LIST_OPTIONS)
    return await get_all(client, "/products", qs, i)


async def delete(client: WooCommerceClient, i: int) -> Any:
    product_id = client.context.get_node_parameter("productId", i)
    return await client.api_request("DELETE", f"/products/{product_id}", {}, {"force": True})


OPERATIONS: dict[str, OperationHandler] = {
    "create": create,
    "delete": delete,
    "get": get,
    "getAll": get_many,
    "update": update,
}
