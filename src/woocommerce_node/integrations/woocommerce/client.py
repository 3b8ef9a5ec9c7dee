"""Authenticated WooCommerce REST API requests and page collection."""

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

import httpx

from woocommerce_node.config import Settings, get_settings
from woocommerce_node.exceptions import NodeApiError, NodeOperationError
from woocommerce_node.models.credentials import WooCommerceCredentials
from woocommerce_node.models.request import ApiResponse, RequestOptions
from woocommerce_node.observability.logging import LogContext

if TYPE_CHECKING:
    from woocommerce_node.host import NodeExecutionContext

logger = logging.getLogger(__name__)


class WooCommerceClient:
    """
    Request executor and paginated collector for one node run.

    Credentials are read from the host once and reused for every call of
    the run. Authentication uses Basic Auth with consumer key/secret unless
    the credentials ask for the keys to travel in the query string.
    """

    def __init__(
        self,
        context: "NodeExecutionContext",
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            context: Host execution context (parameters, credentials, HTTP).
            settings: Node settings; defaults to the cached environment settings.
        """
        self.context = context
        self.settings = settings or get_settings()
        self._credentials: WooCommerceCredentials | None = None

    @property
    def api_root(self) -> str:
        return f"/wp-json/{self.settings.api_version}"

    async def get_credentials(self) -> WooCommerceCredentials:
        """Fetch and cache the store credentials, failing before any call if absent."""
        if self._credentials is None:
            credentials = await self.context.get_credentials()
            if credentials is None:
                raise NodeOperationError(
                    "No credentials got returned!",
                    node_name=self.context.node_name,
                )
            self._credentials = credentials
        return self._credentials

    async def build_options(
        self,
        method: str,
        resource: str,
        body: dict[str, Any] | None = None,
        qs: dict[str, Any] | None = None,
        uri: str | None = None,
        option: dict[str, Any] | None = None,
        path: str | None = None,
    ) -> RequestOptions:
        """
        Assemble the outbound request without sending it.

        The target is ``uri`` if given, else the store URL plus ``path``,
        else the REST API root plus ``resource``. Fields in ``option`` are
        applied last and win over computed ones.
        """
        credentials = await self.get_credentials()
        query = dict(qs or {})

        if uri:
            target = uri
        elif path:
            target = f"{credentials.url}{path}"
        else:
            target = f"{credentials.url}{self.api_root}{resource}"

        auth: tuple[str, str] | None = (credentials.consumer_key, credentials.consumer_secret)
        if credentials.include_credentials_in_query:
            auth = None
            query.update(
                consumer_key=credentials.consumer_key,
                consumer_secret=credentials.consumer_secret,
            )

        options = RequestOptions(
            method=method.upper(),
            uri=target,
            qs=query,
            body=body or None,
            auth=auth,
        )
        if option:
            options = dataclasses.replace(options, **option)
        return options

    async def api_request(
        self,
        method: str,
        resource: str,
        body: dict[str, Any] | None = None,
        qs: dict[str, Any] | None = None,
        uri: str | None = None,
        option: dict[str, Any] | None = None,
        path: str | None = None,
    ) -> Any:
        """
        Make one authenticated API request.

        Args:
            method: HTTP method.
            resource: Path below the REST API root (e.g., "/orders/12").
            body: JSON body; omitted from the request when empty.
            qs: Query parameters.
            uri: Fully qualified URL overriding ``path`` and ``resource``.
            option: Overlay of RequestOptions fields (e.g., {"full_response": True}).
            path: Path below the store URL, for endpoints outside the REST API root.

        Returns:
            Parsed JSON body, or ApiResponse when a full response was requested.

        Raises:
            NodeOperationError: If no credentials are configured.
            NodeApiError: If the request fails (non-2xx, network, auth).
        """
        options = await self.build_options(method, resource, body, qs, uri, option, path)
        logger.debug(f"WooCommerce request: {options.method} {options.uri}")

        try:
            return await self.context.request(options)
        except (httpx.HTTPError, OSError) as e:
            logger.warning(f"WooCommerce request failed: {options.method} {options.uri}: {e}")
            raise NodeApiError.from_transport_error(self.context.node_name, e) from e

    async def api_request_all_items(
        self,
        method: str,
        endpoint: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> list[Any]:
        """
        Fetch every page of a collection endpoint.

        Pages are requested in order, following the Link header's rel="next"
        URL, until a response advertises no next page or ``max_pages`` is hit.

        Args:
            method: HTTP method (normally GET).
            endpoint: Collection path below the REST API root (e.g., "/products").
            body: JSON body sent with every page request.
            query: Filters; ``per_page`` is always overridden.

        Returns:
            Records of all pages, in order.
        """
        query = dict(query or {})
        query["per_page"] = self.settings.per_page

        records: list[Any] = []
        uri: str | None = None
        pages = 0

        while True:
            with LogContext(endpoint=endpoint, page=pages + 1):
                response: ApiResponse = await self.api_request(
                    method, endpoint, body, query, uri, {"full_response": True}
                )
            pages += 1

            if isinstance(response.body, list):
                records.extend(response.body)
            elif response.body is not None:
                records.append(response.body)

            uri = response.next_link
            if uri is None:
                break
            if self.settings.max_pages and pages >= self.settings.max_pages:
                logger.warning(
                    f"Stopped paging {endpoint} after {pages} pages (max_pages reached)"
                )
                break

        logger.debug(f"Collected {len(records)} records from {endpoint} in {pages} pages")
        return records
