from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from .models import (
    Customer,
    CustomerPayload,
    MarketingConsent,
    Metafield,
    SignupRequest,
    SmsMarketingConsent,
)

def consent_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO 8601 with millisecond precision and a 'Z' suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def build_customer_payload(signup: SignupRequest, now: Optional[datetime] = None) -> CustomerPayload:
    stamp = consent_timestamp(now)
    level = signup.hearingLossLevel

    tags = [level] if level else []
    metafields = [Metafield(value=level)] if level else []

    # every signup becomes an active, verified, marketing-subscribed account
    customer = Customer(
        email=signup.email,
        first_name=signup.firstName or "",
        last_name=signup.lastName or "",
        phone=signup.phone or "",
        verified_email=True,
        accepts_marketing=True,
        state="enabled",
        tags=tags,
        metafields=metafields,
        email_marketing_consent=MarketingConsent(consent_updated_at=stamp),
        sms_marketing_consent=SmsMarketingConsent(consent_updated_at=stamp),
    )
    return CustomerPayload(customer=customer)
