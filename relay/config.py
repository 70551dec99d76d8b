from __future__ import annotations
import os
from dataclasses import dataclass

from .errors import ConfigurationError

SHOPIFY_API_VERSION = "2023-07"

def getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default)

def getenv_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)).strip())
    except Exception:
        return default

@dataclass(frozen=True)
class Config:
    SHOPIFY_ACCESS_TOKEN: str
    SHOPIFY_STORE_URL: str

    HOST: str = "0.0.0.0"
    PORT: int = 5001
    LOG_LEVEL: str = "INFO"

    @property
    def customers_url(self) -> str:
        return f"https://{self.SHOPIFY_STORE_URL}/admin/api/{SHOPIFY_API_VERSION}/customers.json"

    @classmethod
    def from_env(cls) -> "Config":
        token = getenv_str("SHOPIFY_ACCESS_TOKEN", "").strip()
        store = getenv_str("SHOPIFY_STORE_URL", "").strip()
        missing = [name for name, value in (
            ("SHOPIFY_ACCESS_TOKEN", token),
            ("SHOPIFY_STORE_URL", store),
        ) if not value]
        if missing:
            raise ConfigurationError(missing)
        return cls(
            SHOPIFY_ACCESS_TOKEN=token,
            SHOPIFY_STORE_URL=store,
            HOST=getenv_str("HOST", "0.0.0.0"),
            PORT=getenv_int("PORT", 5001),
            LOG_LEVEL=getenv_str("LOG_LEVEL", "INFO"),
        )
