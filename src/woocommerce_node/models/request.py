"""Outbound request and response descriptors."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class RequestOptions:
    """
    One outbound call to the WooCommerce API.

    Built fresh for every call by the request executor and handed to the
    host's HTTP capability. ``qs`` is merged over any query already in
    ``uri`` (next-page links carry their own). ``body`` is None when there is
    nothing to send.
    """

    method: str
    uri: str
    qs: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | list[Any] | None = None
    auth: tuple[str, str] | None = None
    full_response: bool = False


@dataclass
class ApiResponse:
    """Full HTTP response, returned when ``full_response`` is requested."""

    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)
    status_code: int = 200
    # Parsed Link header keyed by relation, e.g. {"next": {"url": ..., "rel": "next"}}
    links: dict[str, dict[str, str]] = field(default_factory=dict)

    @property
    def next_link(self) -> str | None:
        """
        URL of the next page, if the server advertised one.

        Hosts that only return headers get their Link header parsed here.
        """
        links = self.links or self._header_links()
        return links.get("next", {}).get("url") or None

    def _header_links(self) -> dict[str, dict[str, str]]:
        if not self.headers:
            return {}
        parsed = httpx.Response(self.status_code, headers=dict(self.headers)).links
        return {rel: dict(link) for rel, link in parsed.items()}
