from __future__ import annotations
from typing import Any, Tuple, Union
from pydantic import ValidationError as PydanticValidationError
from .errors import ValidationError
from .models import PHONE_ERROR, SignupRequest

_MESSAGES = {
    "missing": "is required",
    "string_type": "must be a string",
    "float_type": "must be a number",
    "float_parsing": "must be a number",
    "finite_number": "must be a number",
    "extra_forbidden": "is not allowed",
}

def _first_error(exc: PydanticValidationError) -> ValidationError:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err.get("loc", ())) or "value"
    if err["type"] == "value_error":
        # raised by our own field validators; keep their wording
        reason = str(err["ctx"]["error"])
    else:
        reason = _MESSAGES.get(err["type"], err["msg"])
    if reason == PHONE_ERROR:
        return ValidationError(reason, field=field)
    return ValidationError(f'"{field}" {reason}', field=field)

def validate_signup(raw: Any) -> Tuple[bool, Union[SignupRequest, ValidationError]]:
    """
    Returns (is_valid, signup_or_error).
    Only the first failure is reported, the way the HTTP 400 body carries a single message.
    """
    if not isinstance(raw, dict):
        return False, ValidationError('"value" must be of type object')
    try:
        return True, SignupRequest.model_validate(raw)
    except PydanticValidationError as e:
        return False, _first_error(e)
