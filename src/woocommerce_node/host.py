"""Host execution context the node runs inside."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from woocommerce_node.exceptions import NodeOperationError
from woocommerce_node.integrations.woocommerce.transport import HttpTransport
from woocommerce_node.models.credentials import WooCommerceCredentials
from woocommerce_node.models.request import RequestOptions

# Sentinel for "no default given" in get_node_parameter
_MISSING: Any = object()


class NodeExecutionContext(ABC):
    """
    Abstract capabilities a workflow host provides to the node.

    The host owns parameter storage, credential storage and the HTTP stack;
    the node only shapes requests and collects results.
    """

    @property
    @abstractmethod
    def node_name(self) -> str:
        """Return the display name of the node instance."""
        ...

    @abstractmethod
    def get_input_data(self) -> list[dict[str, Any]]:
        """Return the input items, in order."""
        ...

    @abstractmethod
    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        """
        Return a node parameter as resolved for one input item.

        Args:
            name: Parameter name (e.g., "resource", "additionalFields").
            item_index: Index of the input item.
            default: Returned when the parameter is not set.

        Raises:
            NodeOperationError: If the parameter is not set and no default was given.
        """
        ...

    @abstractmethod
    async def get_credentials(self) -> WooCommerceCredentials | None:
        """Return the WooCommerce credentials, or None if none are configured."""
        ...

    @abstractmethod
    async def request(self, options: RequestOptions) -> Any:
        """Execute one HTTP request and return the parsed body (or ApiResponse)."""
        ...

    def continue_on_fail(self) -> bool:
        """Whether a failing item should produce an error record instead of aborting."""
        return False


class LocalExecutionContext(NodeExecutionContext):
    """
    Execution context backed by in-memory parameters and an httpx transport.

    Used by scripts and tests. Parameters apply to every item unless
    overridden for a specific index through ``item_parameters``.
    """

    def __init__(
        self,
        parameters: Mapping[str, Any],
        credentials: WooCommerceCredentials | None,
        items: Sequence[dict[str, Any]] | None = None,
        item_parameters: Sequence[Mapping[str, Any]] | None = None,
        transport: HttpTransport | None = None,
        node_name: str = "WooCommerce",
        continue_on_fail: bool = False,
    ) -> None:
        self.parameters = dict(parameters)
        self.credentials = credentials
        self.items = list(items) if items is not None else [{}]
        self.item_parameters = list(item_parameters or [])
        self.transport = transport or HttpTransport()
        self._node_name = node_name
        self._continue_on_fail = continue_on_fail

    @property
    def node_name(self) -> str:
        return self._node_name

    def get_input_data(self) -> list[dict[str, Any]]:
        return self.items

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        if item_index < len(self.item_parameters) and name in self.item_parameters[item_index]:
            return self.item_parameters[item_index][name]
        if name in self.parameters:
            return self.parameters[name]
        if default is not _MISSING:
            return default
        raise NodeOperationError(
            f'Could not get parameter "{name}"',
            node_name=self.node_name,
        )

    async def get_credentials(self) -> WooCommerceCredentials | None:
        return self.credentials

    async def request(self, options: RequestOptions) -> Any:
        return await self.transport.request(options)

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail
