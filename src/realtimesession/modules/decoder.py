"""
Decoding of the sessions endpoint response into a SessionResult.

Validation is done by the pydantic models; the first validation error is
reported as a DecodeError naming the offending field path, so a caller never
sees a partially decoded session.
"""

from pydantic import ValidationError

from realtimesession.modules.errors import DecodeError
from realtimesession.modules.session_config import SessionResult

JSON_TYPE_NAMES = {
    type(None): "null",
    bool: "boolean",
    int: "integer",
    float: "number",
    str: "string",
    list: "array",
    dict: "object",
}

EXPECTED_BY_ERROR_TYPE = {
    "missing": "required field",
    "string_type": "string",
    "int_type": "integer",
    "float_type": "number",
    "bool_type": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "int_or_string_type": "integer or string",
    "unix_millis_range": "Unix milliseconds within datetime range",
}


def describe(value):
    return JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def format_path(loc):
    """('tools', 1, 'name') -> 'tools[1].name'; the empty location is the document root."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "$"


def to_decode_error(error: ValidationError) -> DecodeError:
    detail = error.errors()[0]
    error_type = detail["type"]
    expected = EXPECTED_BY_ERROR_TYPE.get(error_type, detail["msg"])
    actual = "missing field" if error_type == "missing" else describe(detail.get("input"))
    return DecodeError(format_path(detail["loc"]), expected, actual)


def decode(payload) -> SessionResult:
    """Decode a parsed JSON response into a SessionResult, raising DecodeError on mismatch."""
    try:
        return SessionResult.model_validate(payload)
    except ValidationError as e:
        raise to_decode_error(e) from e
