import httpx
import pytest
from structlog.testing import capture_logs
from relay.models import SignupRequest
from relay.payload_builder import build_customer_payload
from relay.shopify_client import UpstreamFailure, UpstreamSuccess

def _payload(**fields):
    return build_customer_payload(SignupRequest(email="a@b.com", **fields))

@pytest.mark.asyncio
async def test_posts_to_customers_endpoint(shopify_client, shopify_stub):
    await shopify_client.create_customer(_payload(hearingLossLevel="moderate"))

    assert len(shopify_stub.calls) == 1
    req = shopify_stub.calls[0]
    assert req.method == "POST"
    assert str(req.url) == "https://test-store.myshopify.com/admin/api/2023-07/customers.json"
    assert req.headers["X-Shopify-Access-Token"] == "shpat_test"
    assert req.headers["Content-Type"] == "application/json"
    sent = shopify_stub.sent_json()
    assert sent["customer"]["email"] == "a@b.com"
    assert sent["customer"]["tags"] == "moderate"
    assert sent["customer"]["metafields"][0]["key"] == "hearing_loss_level"

@pytest.mark.asyncio
async def test_created_is_success(shopify_client, shopify_stub):
    shopify_stub.headers = {"X-Shopify-Shop-Api-Call-Limit": "1/40"}
    result = await shopify_client.create_customer(_payload())
    assert result == UpstreamSuccess(customer={"customer": {"id": 1, "email": "a@b.com"}})

@pytest.mark.asyncio
async def test_unprocessable_is_failure(shopify_client, shopify_stub):
    shopify_stub.status_code = 422
    shopify_stub.body = {"errors": {"email": ["has already been taken"]}}
    result = await shopify_client.create_customer(_payload())
    assert isinstance(result, UpstreamFailure)
    assert result.status_code == 422
    assert result.body == {"errors": {"email": ["has already been taken"]}}

@pytest.mark.asyncio
async def test_transport_error_propagates(shopify_client, shopify_stub):
    shopify_stub.raise_exc = httpx.ConnectError("connection refused")
    with pytest.raises(httpx.ConnectError):
        await shopify_client.create_customer(_payload())
    assert len(shopify_stub.calls) == 1

@pytest.mark.asyncio
async def test_call_limit_header_is_logged(shopify_client, shopify_stub):
    shopify_stub.headers = {"X-Shopify-Shop-Api-Call-Limit": "1/40"}
    with capture_logs() as logs:
        await shopify_client.create_customer(_payload())
    limits = [e for e in logs if e["event"] == "shopify_api_call_limit"]
    assert limits == [{"event": "shopify_api_call_limit", "log_level": "info", "limit": "1/40"}]

@pytest.mark.asyncio
async def test_no_call_limit_event_without_header(shopify_client):
    with capture_logs() as logs:
        await shopify_client.create_customer(_payload())
    assert [e for e in logs if e["event"] == "shopify_api_call_limit"] == []

@pytest.mark.asyncio
async def test_payload_logged_at_debug(shopify_client):
    with capture_logs() as logs:
        await shopify_client.create_customer(_payload(hearingLossLevel="mild"))
    sent = [e for e in logs if e["event"] == "shopify_payload"]
    assert len(sent) == 1
    assert sent[0]["log_level"] == "debug"
    assert sent[0]["payload"]["customer"]["tags"] == "mild"
