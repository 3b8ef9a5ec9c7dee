"""WooCommerce node: dispatches each input item to a resource operation."""

import asyncio
import logging
from typing import Any

from woocommerce_node.config import Settings, get_settings
from woocommerce_node.exceptions import NodeOperationError, WooCommerceNodeError
from woocommerce_node.host import NodeExecutionContext
from woocommerce_node.integrations.woocommerce.client import WooCommerceClient
from woocommerce_node.observability.context import item_context
from woocommerce_node.resources import RESOURCES, OperationHandler

logger = logging.getLogger(__name__)


class WooCommerceNode:
    """
    Workflow node consuming the WooCommerce REST API.

    Resources: customer, product, order, custom.
    Operations: create, get, getAll, update, delete.

    Resource and operation are read once from the first item; every other
    parameter is resolved per item. Output records keep input order, with
    list responses flattened in place.
    """

    display_name = "WooCommerce"
    name = "wooCommerce"

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the node.

        Args:
            settings: Node settings; defaults to the cached environment settings.
        """
        self.settings = settings or get_settings()

    def resolve_handler(
        self,
        resource: str,
        operation: str,
        node_name: str,
    ) -> OperationHandler:
        """
        Look up the handler for a resource/operation pair.

        Raises:
            NodeOperationError: If the pair is not supported.
        """
        operations = RESOURCES.get(resource)
        if operations is None:
            raise NodeOperationError(
                f'The resource "{resource}" is not known!',
                node_name=node_name,
            )
        handler = operations.get(operation)
        if handler is None:
            raise NodeOperationError(
                f'The operation "{operation}" is not known for resource "{resource}"!',
                node_name=node_name,
            )
        return handler

    async def execute(self, context: NodeExecutionContext) -> list[dict[str, Any]]:
        """
        Run the node over all input items.

        Args:
            context: Host execution context.

        Returns:
            Output records, in input order.

        Raises:
            WooCommerceNodeError: For the first failing item, unless the host
                asked to continue on failure.
        """
        items = context.get_input_data()
        resource = context.get_node_parameter("resource", 0)
        operation = context.get_node_parameter("operation", 0)
        handler = self.resolve_handler(resource, operation, context.node_name)

        client = WooCommerceClient(context, self.settings)
        await client.get_credentials()

        logger.info(
            f"Executing {resource}:{operation} for {len(items)} items "
            f"(concurrency={self.settings.item_concurrency})"
        )

        if self.settings.item_concurrency <= 1:
            responses = [
                await self._process_item(client, handler, resource, operation, i)
                for i in range(len(items))
            ]
        else:
            semaphore = asyncio.Semaphore(self.settings.item_concurrency)

            async def bounded(i: int) -> Any:
                async with semaphore:
                    return await self._process_item(client, handler, resource, operation, i)

            tasks = [asyncio.create_task(bounded(i)) for i in range(len(items))]
            try:
                responses = await asyncio.gather(*tasks)
            except BaseException:
                # Stop sibling items from sending further requests
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        return_data: list[dict[str, Any]] = []
        for response in responses:
            if isinstance(response, list):
                return_data.extend(response)
            else:
                return_data.append(response)
        return return_data

    async def _process_item(
        self,
        client: WooCommerceClient,
        handler: OperationHandler,
        resource: str,
        operation: str,
        i: int,
    ) -> Any:
        """Run one item, converting failures to error records when the host allows."""
        context = client.context
        with item_context(context.node_name, i, resource, operation):
            try:
                return await handler(client, i)
            except WooCommerceNodeError as e:
                if context.continue_on_fail():
                    logger.warning(f"Item {i} failed, continuing: {e.message}")
                    return {"error": e.message}
                logger.error(f"Item {i} failed: {e.message}")
                raise

    async def get_categories(self, context: NodeExecutionContext) -> list[dict[str, Any]]:
        """List product categories as {name, value} options."""
        client = WooCommerceClient(context, self.settings)
        categories = await client.api_request_all_items("GET", "/products/categories", {})
        return [{"name": category["name"], "value": category["id"]} for category in categories]

    async def get_tags(self, context: NodeExecutionContext) -> list[dict[str, Any]]:
        """List product tags as {name, value} options."""
        client = WooCommerceClient(context, self.settings)
        tags = await client.api_request_all_items("GET", "/products/tags", {})
        return [{"name": tag["name"], "value": tag["id"]} for tag in tags]
