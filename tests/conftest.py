import json, pytest
import httpx
import structlog

from relay.config import Config
from relay.shopify_client import ShopifyClient

class ShopifyStub:
    """Stands in for the Shopify Admin API; records every request it sees."""

    def __init__(self):
        self.calls = []
        self.status_code = 201
        self.body = {"customer": {"id": 1, "email": "a@b.com"}}
        self.headers = {}
        self.raise_exc = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)

    def sent_json(self, i=-1):
        return json.loads(self.calls[i].content)

@pytest.fixture
def test_cfg():
    return Config(
        SHOPIFY_ACCESS_TOKEN="shpat_test",
        SHOPIFY_STORE_URL="test-store.myshopify.com",
    )

@pytest.fixture
def shopify_stub():
    return ShopifyStub()

@pytest.fixture
def shopify_client(test_cfg, shopify_stub):
    return ShopifyClient(test_cfg, transport=httpx.MockTransport(shopify_stub))

@pytest.fixture(autouse=True)
def reset_structlog():
    # server.main() configures a level filter that would hide debug events from capture_logs
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
