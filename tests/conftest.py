"""Pytest configuration and fixtures."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from woocommerce_node.config import Settings  # noqa: E402
from woocommerce_node.host import LocalExecutionContext  # noqa: E402
from woocommerce_node.integrations.woocommerce.transport import HttpTransport  # noqa: E402
from woocommerce_node.models.credentials import WooCommerceCredentials  # noqa: E402

STORE_URL = "https://test-store.com"
API_ROOT = f"{STORE_URL}/wp-json/wc/v3"


class RecordingStore:
    """
    Fake WooCommerce server for httpx.MockTransport.

    Records every request and answers from a queue of responses (the last
    response repeats once the queue is drained).
    """

    def __init__(self, responses: list[httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.responses = list(responses or [httpx.Response(200, json={"id": 1})])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def json_body(self, index: int = -1) -> Any:
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, max_pages=1000, item_concurrency=1)


@pytest.fixture
def credentials() -> WooCommerceCredentials:
    """Basic Auth credentials for the test store."""
    return WooCommerceCredentials(
        url=STORE_URL,
        consumer_key="ck_test",
        consumer_secret="cs_test",
    )


@pytest.fixture
def query_credentials() -> WooCommerceCredentials:
    """Credentials that travel in the query string."""
    return WooCommerceCredentials(
        url=STORE_URL,
        consumer_key="ck_test",
        consumer_secret="cs_test",
        include_credentials_in_query=True,
    )


@pytest.fixture
def store() -> RecordingStore:
    """Fake store answering {"id": 1} by default."""
    return RecordingStore()


@pytest.fixture
def make_store() -> type[RecordingStore]:
    """Build a fake store with a scripted list of responses."""
    return RecordingStore


@pytest.fixture
def make_context(
    credentials: WooCommerceCredentials,
) -> Callable[..., LocalExecutionContext]:
    """Factory building a LocalExecutionContext wired to a RecordingStore."""

    def factory(
        store: RecordingStore,
        parameters: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> LocalExecutionContext:
        kwargs.setdefault("credentials", credentials)
        client = httpx.AsyncClient(transport=httpx.MockTransport(store))
        return LocalExecutionContext(
            parameters=parameters or {},
            transport=HttpTransport(client=client),
            **kwargs,
        )

    return factory
