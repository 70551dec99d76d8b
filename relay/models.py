from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from email_validator import validate_email, EmailNotValidError
import phonenumbers

PHONE_ERROR = "Enter a valid phone number in E.164 format"

class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None
    hearingLossLevel: Optional[str] = None
    # accepted and type-checked, not forwarded to Shopify
    averageVolume: Optional[float] = None
    wordRecognitionScore: Optional[float] = None
    wordsMissed: Optional[float] = None

    # a field may be omitted, but when sent it must hold a real value
    @field_validator("firstName", "lastName", "phone", "hearingLossLevel", mode="before")
    @classmethod
    def string_present(cls, v):
        if v is None:
            raise ValueError("must be a string")
        if v == "":
            raise ValueError("is not allowed to be empty")
        return v

    @field_validator("averageVolume", "wordRecognitionScore", "wordsMissed", mode="before")
    @classmethod
    def number_present(cls, v):
        if v is None or isinstance(v, bool):
            raise ValueError("must be a number")
        return v

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        if v == "":
            raise ValueError("is not allowed to be empty")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("must be a valid email")
        # forwarded as typed, not in normalized form
        return v

    @field_validator("phone")
    @classmethod
    def phone_international(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        # no default region: the number must carry its own country code
        try:
            number = phonenumbers.parse(v, None)
        except phonenumbers.NumberParseException:
            raise ValueError(PHONE_ERROR)
        if not phonenumbers.is_valid_number(number):
            raise ValueError(PHONE_ERROR)
        return v

class MarketingConsent(BaseModel):
    state: str = "subscribed"
    opt_in_level: str = "single_opt_in"
    consent_updated_at: str

class SmsMarketingConsent(MarketingConsent):
    consent_collected_from: str = "SHOPIFY"

class Metafield(BaseModel):
    namespace: str = "custom"
    key: str = "hearing_loss_level"
    value: str
    type: str = "single_line_text_field"

class Customer(BaseModel):
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    verified_email: bool = True
    accepts_marketing: bool = True
    state: str = "enabled"
    tags: List[str] = Field(default_factory=list)
    metafields: List[Metafield] = Field(default_factory=list)
    email_marketing_consent: MarketingConsent
    sms_marketing_consent: SmsMarketingConsent

    @field_serializer("tags", when_used="json")
    def tags_csv(self, tags: List[str]) -> str:
        # Admin API takes tags as one comma-separated string
        return ", ".join(tags)

class CustomerPayload(BaseModel):
    customer: Customer
