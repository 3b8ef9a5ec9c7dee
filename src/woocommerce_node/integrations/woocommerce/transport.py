"""HTTP transport for WooCommerce requests built on httpx."""

import logging
from typing import Any

import httpx

from woocommerce_node.models.request import ApiResponse, RequestOptions

logger = logging.getLogger(__name__)


class NonJsonResponseError(httpx.DecodingError):
    """A successful response whose body could not be decoded as JSON."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(
            f"Expected JSON but got {response.headers.get('content-type', 'no content type')}",
            request=response.request,
        )
        self.response = response


class HttpTransport:
    """
    Executes RequestOptions with an httpx.AsyncClient.

    Raises httpx errors as-is (HTTPStatusError for non-2xx responses,
    NonJsonResponseError for 2xx bodies that are not JSON); wrapping them is
    the request executor's job.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the transport.

        Args:
            client: Pre-configured client (e.g., one using httpx.MockTransport).
            timeout: Timeout in seconds for a lazily created client.
        """
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request(self, options: RequestOptions) -> Any:
        """
        Send one request.

        Returns:
            The parsed JSON body, or an ApiResponse when options.full_response is set.
        """
        # A next link carries its own query; options.qs is merged over it
        url = httpx.URL(options.uri).copy_merge_params(options.qs)
        response = await self.client.request(
            options.method,
            url,
            json=options.body,
            auth=options.auth,
        )
        response.raise_for_status()

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError as e:
                raise NonJsonResponseError(response) from e
        if options.full_response:
            return ApiResponse(
                body=body,
                headers=response.headers,
                status_code=response.status_code,
                links={rel: dict(link) for rel, link in response.links.items()},
            )
        return body
