"""Helpers shared by the resource handlers."""

from collections.abc import Awaitable, Callable
from typing import Any

from woocommerce_node.exceptions import NodeOperationError
from woocommerce_node.host import NodeExecutionContext
from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.integrations.woocommerce.mapping import NO_VALUE, validate_json

# An operation handler: (client, item_index) -> API response
OperationHandler = Callable[[WooCommerceClient, int], Awaitable[Any]]


def get_ui_values(context: NodeExecutionContext, ui_name: str, values_name: str, i: int) -> Any:
    """
    Read the rows of a fixed-collection parameter such as billingUi.billingValues.

    Returns:
        The inner value, or None when the collection is unset or empty.
    """
    collection = context.get_node_parameter(ui_name, i, {}) or {}
    return collection.get(values_name)


def parse_json_parameter(context: NodeExecutionContext, text: str, label: str) -> Any:
    """
    Parse JSON entered in a node parameter.

    Args:
        context: Execution context (for error attribution).
        text: The JSON text.
        label: Human name of the parameter used in the error message.

    Raises:
        NodeOperationError: If the text is not valid JSON.
    """
    parsed = validate_json(text)
    if parsed is NO_VALUE:
        raise NodeOperationError(f"{label} must be a valid JSON", node_name=context.node_name)
    return parsed


def parse_json_object(context: NodeExecutionContext, text: str, label: str) -> dict[str, Any]:
    """Parse a JSON parameter that must be an object; empty text yields {}."""
    if text == "":
        return {}
    parsed = parse_json_parameter(context, text, label)
    if not isinstance(parsed, dict):
        raise NodeOperationError(f"{label} must be a JSON object", node_name=context.node_name)
    return parsed


def convert_field(
    context: NodeExecutionContext,
    name: str,
    convert: Callable[[Any], Any],
    value: Any,
) -> Any:
    """
    Apply a numeric conversion to a user-entered field.

    Raises:
        NodeOperationError: Naming the field, if the value is not a number.
    """
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise NodeOperationError(f"{name} must be a number", node_name=context.node_name) from e


def apply_options(
    context: NodeExecutionContext,
    options: dict[str, Any],
    option_map: dict[str, tuple[str, Callable[[Any], Any]]],
) -> dict[str, Any]:
    """
    Translate set getAll options into query parameters.

    Args:
        context: Execution context (for error attribution).
        options: The "options" collection from the node parameters.
        option_map: Option name -> (query key, converter), applied in order.

    Returns:
        Query parameters for every truthy option.

    Raises:
        NodeOperationError: If a numeric option is not a number.
    """
    qs: dict[str, Any] = {}
    for name, (query_key, convert) in option_map.items():
        if options.get(name):
            qs[query_key] = convert_field(context, name, convert, options[name])
    return qs


async def get_all(
    client: WooCommerceClient,
    endpoint: str,
    qs: dict[str, Any],
    i: int,
) -> Any:
    """Run a list operation honoring the returnAll / limit parameters."""
    return_all = client.context.get_node_parameter("returnAll", i, False)
    if return_all:
        return await client.api_request_all_items("GET", endpoint, {}, qs)

    qs["per_page"] = client.context.get_node_parameter("limit", i, 50)
    return await client.api_request("GET", endpoint, {}, qs)
