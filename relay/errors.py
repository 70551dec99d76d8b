from __future__ import annotations
from typing import Any, List, TypedDict

class ErrorBody(TypedDict):
    error: Any

class ServerErrorBody(TypedDict):
    message: str
    error: str

class ConfigurationError(Exception):
    """Required startup configuration is absent. Fatal."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__("Missing required environment variables: " + ", ".join(self.missing))

class ValidationError(Exception):
    """Inbound signup record was rejected; surfaced as HTTP 400."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field
