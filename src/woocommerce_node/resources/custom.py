"""Custom resource: any path under the WooCommerce REST API root."""

from typing import Any

from woocommerce_node.host import NodeExecutionContext
from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import parse_name_value_array
from woocommerce_node.models.parameters import (
    FieldParameters,
    JsonParameters,
    custom_parameters_adapter,
)
from woocommerce_node.resources.common import OperationHandler, get_ui_values, parse_json_object


def resolve_parameters(context: NodeExecutionContext, i: int) -> JsonParameters | FieldParameters:
    """Pick the query/body input variant from the jsonParameters toggle."""
    if context.get_node_parameter("jsonParameters", i, False):
        return custom_parameters_adapter.validate_python({
            "kind": "json",
            "query": context.get_node_parameter("queryParametersJson", i, ""),
            "body": context.get_node_parameter("bodyParametersJson", i, ""),
        })
    return custom_parameters_adapter.validate_python({
        "kind": "fields",
        "query": get_ui_values(context, "queryParametersUi", "parameter", i),
        "body": get_ui_values(context, "bodyParametersUi", "parameter", i),
    })


def build_query(
    context: NodeExecutionContext,
    parameters: JsonParameters | FieldParameters,
) -> dict[str, Any]:
    if isinstance(parameters, JsonParameters):
        return parse_json_object(context, parameters.query, "Query Parameters")
    return parse_name_value_array(parameters.query)


def build_body(
    context: NodeExecutionContext,
    parameters: JsonParameters | FieldParameters,
) -> dict[str, Any]:
    if isinstance(parameters, JsonParameters):
        return parse_json_object(context, parameters.body, "Body Parameters")
    return parse_name_value_array(parameters.body)


def _resource_path(client: WooCommerceClient, i: int, with_id: bool = False) -> str:
    path = client.context.get_node_parameter("resourcePath", i)
    if with_id:
        path = f"{path}/{client.context.get_node_parameter('id', i)}"
    return path


async def create(client: WooCommerceClient, i: int) -> Any:
    parameters = resolve_parameters(client.context, i)
    qs = build_query(client.context, parameters)
    body = build_body(client.context, parameters)
    return await client.api_request("POST", _resource_path(client, i), body, qs)


async def update(client: WooCommerceClient, i: int) -> Any:
    parameters = resolve_parameters(client.context, i)
    qs = build_query(client.context, parameters)
    body = build_body(client.context, parameters)
    return await client.api_request("PUT", _resource_path(client, i, with_id=True), body, qs)


async def get(client: WooCommerceClient, i: int) -> Any:
    return await client.api_request("GET", _resource_path(client, i, with_id=True))


async def get_many(client: WooCommerceClient, i: int) -> Any:
    parameters = resolve_parameters(client.context, i)
    qs = build_query(client.context, parameters)
    return await client.api_request("GET", _resource_path(client, i), {}, qs)


async def delete(client: WooCommerceClient, i: int) -> Any:
    return await client.api_request("DELETE", _resource_path(client, i, with_id=True))


OPERATIONS: dict[str, OperationHandler] = {
    "create": create,
    "delete": delete,
    "get": get,
    "getAll": get_many,
    "update": update,
}
