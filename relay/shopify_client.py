from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import httpx
from .config import Config
from .logger import get_logger
from .models import CustomerPayload

log = get_logger()

CALL_LIMIT_HEADER = "X-Shopify-Shop-Api-Call-Limit"

@dataclass(frozen=True)
class UpstreamSuccess:
    customer: Dict[str, Any]

@dataclass(frozen=True)
class UpstreamFailure:
    status_code: int
    body: Any

UpstreamResult = Union[UpstreamSuccess, UpstreamFailure]

class ShopifyClient:
    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = config.customers_url
        self.headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": config.SHOPIFY_ACCESS_TOKEN,
        }
        self._transport = transport

    async def create_customer(self, payload: CustomerPayload) -> UpstreamResult:
        """
        One POST to the customers endpoint, no retries.
        Transport faults and non-JSON bodies raise; the caller maps them to a 500.
        """
        body = payload.model_dump(mode="json")
        log.debug("shopify_payload", payload=body)

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(self.url, json=body, headers=self.headers)

        call_limit = response.headers.get(CALL_LIMIT_HEADER)
        if call_limit:
            log.info("shopify_api_call_limit", limit=call_limit)

        if not response.is_success:
            error_data = response.json()
            log.error("shopify_error", status_code=response.status_code, error=error_data)
            return UpstreamFailure(status_code=response.status_code, body=error_data)

        data = response.json()
        log.info("customer_created", status_code=response.status_code)
        return UpstreamSuccess(customer=data)
