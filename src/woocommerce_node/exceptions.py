"""Domain exceptions for the WooCommerce node.

Every failure reported to the host is one of these, so the host can attach it
to the input item that caused it.
"""

from typing import Any

import httpx


class WooCommerceNodeError(Exception):
    """Base exception for WooCommerce node errors."""

    def __init__(
        self,
        message: str,
        *,
        node_name: str | None = None,
        status_code: int = 500,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.node_name = node_name
        self.status_code = status_code
        self.detail = detail or message

    def __str__(self) -> str:
        if self.node_name:
            return f"[{self.node_name}] {self.message}"
        return self.message


class NodeOperationError(WooCommerceNodeError):
    """Raised when node input is invalid or the node cannot run (bad JSON, no credentials)."""

    def __init__(
        self,
        message: str,
        *,
        node_name: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message, node_name=node_name, status_code=400, detail=detail)


class NodeApiError(WooCommerceNodeError):
    """Raised when a call to the WooCommerce API fails at the transport level."""

    def __init__(
        self,
        message: str,
        *,
        node_name: str | None = None,
        status_code: int = 502,
        detail: str | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, node_name=node_name, status_code=status_code, detail=detail)
        self.response_body = response_body

    @classmethod
    def from_transport_error(cls, node_name: str, error: Exception) -> "NodeApiError":
        """
        Wrap an httpx (or socket) failure.

        WooCommerce error bodies look like {"code": ..., "message": ..., "data": {...}};
        the API message is preferred over the generic HTTP reason phrase.
        """
        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            try:
                body = response.json()
            except ValueError:
                body = response.text or None

            api_message = body.get("message") if isinstance(body, dict) else None
            message = api_message or f"{response.status_code} {response.reason_phrase}".strip()
            return cls(
                message,
                node_name=node_name,
                status_code=response.status_code,
                detail=str(error),
                response_body=body,
            )

        response = getattr(error, "response", None)
        if isinstance(error, httpx.DecodingError) and isinstance(response, httpx.Response):
            return cls(
                f"WooCommerce returned a response that is not JSON ({response.status_code})",
                node_name=node_name,
                status_code=502,
                detail=str(error),
                response_body=response.text,
            )

        return cls(
            f"Request to WooCommerce failed: {error}",
            node_name=node_name,
            detail=repr(error),
        )
