"""Customer operations.

https://woocommerce.github.io/woocommerce-rest-api-docs/#customers
"""

from typing import Any

from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import adjust_metadata
from woocommerce_node.resources.common import OperationHandler, get_all


async def create(client: WooCommerceClient, i: int) -> Any:
    context = client.context
    body: dict[str, Any] = {"email": context.get_node_parameter("email", i)}

    additional_fields = context.get_node_parameter("additionalFields", i, {})
    if additional_fields:
        body.update(adjust_metadata(additional_fields))

    return await client.api_request("POST", "/customers", body)


async def delete(client: WooCommerceClient, i: int) -> Any:
    customer_id = client.context.get_node_parameter("customerId", i)
    # Customers cannot be trashed; force is required
    qs = {"force": True}
    return await client.api_request("DELETE", f"/customers/{customer_id}", {}, qs)


async def get(client: WooCommerceClient, i: int) -> Any:
    customer_id = client.context.get_node_parameter("customerId", i)
    return await client.api_request("GET", f"/customers/{customer_id}")


async def get_many(client: WooCommerceClient, i: int) -> Any:
    filters = client.context.get_node_parameter("filters", i, {})
    qs: dict[str, Any] = dict(filters or {})
    return await get_all(client, "/customers", qs, i)


async def update(client: WooCommerceClient, i: int) -> Any:
    context = client.context
    body: dict[str, Any] = {}

    update_fields = context.get_node_parameter("updateFields", i, {})
    if update_fields:
        body.update(adjust_metadata(update_fields))

    customer_id = context.get_node_parameter("customerId", i)
    return await client.api_request("PUT", f"/customers/{customer_id}", body)


OPERATIONS: dict[str, OperationHandler] = {
    "create": create,
    "delete": delete,
    "get": get,
    "getAll": get_many,
    "update": update,
}
