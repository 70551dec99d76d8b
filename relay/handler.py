from __future__ import annotations
from typing import Any, Dict, Tuple, Union
from .errors import ErrorBody, ServerErrorBody, ValidationError
from .logger import get_logger
from .payload_builder import build_customer_payload
from .shopify_client import ShopifyClient, UpstreamFailure, UpstreamSuccess
from .validator import validate_signup

log = get_logger()

SUCCESS_MESSAGE = "Customer added to Shopify successfully"

Outcome = Union[ValidationError, UpstreamFailure, UpstreamSuccess, Exception]

def translate(outcome: Outcome) -> Tuple[int, Dict[str, Any]]:
    """Map a pipeline outcome to (status_code, json_body)."""
    if isinstance(outcome, ValidationError):
        return 400, ErrorBody(error=outcome.message)
    if isinstance(outcome, UpstreamFailure):
        return outcome.status_code, ErrorBody(error=outcome.body)
    if isinstance(outcome, UpstreamSuccess):
        return 200, {"message": SUCCESS_MESSAGE, "data": outcome.customer}
    return 500, ServerErrorBody(message="Internal Server Error", error=str(outcome))

async def handle_signup(raw: Any, client: ShopifyClient) -> Tuple[int, Dict[str, Any]]:
    ok, result = validate_signup(raw)
    if not ok:
        log.warning("signup_rejected", reason=result.message, field=result.field)
        return translate(result)

    try:
        payload = build_customer_payload(result)
        outcome = await client.create_customer(payload)
    except Exception as e:
        log.error("server_error", error=str(e), error_type=type(e).__name__)
        return translate(e)
    return translate(outcome)
