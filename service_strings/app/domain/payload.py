"""
Request payload parsing for the transform endpoints.

Bodies are read as JSON first, matching clients that send a JSON document
without a JSON content type (``curl -d '{...}'``). Form-encoded bodies are
accepted as a fallback, with repeated keys forming a list.
"""

import json
from typing import Any, Dict, List
from urllib.parse import parse_qs

from shared.errors import ValidationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_body(raw_body: bytes, content_type: str = "") -> Dict[str, Any]:
    """Decode a request body into a parameter mapping.

    An empty or undecodable body yields an empty mapping so the caller can
    report the missing parameters.
    """
    if not raw_body:
        return {}

    try:
        payload = json.loads(raw_body)
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        return payload

    if content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        try:
            form = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
        except UnicodeDecodeError:
            return {}
        return {
            key.removesuffix("[]"): values if key.endswith("[]") or len(values) > 1 else values[0]
            for key, values in form.items()
        }

    return {}


def require_string(params: Dict[str, Any], name: str) -> str:
    """Return a non-empty string parameter or raise ValidationError."""
    value = params.get(name)
    if value is None or value == "":
        raise ValidationError(f"Missing param '{name}'")
    if not isinstance(value, str):
        raise ValidationError(f"Param '{name}' must be a string")
    return value


def require_char_lists(params: Dict[str, Any], *names: str) -> List[List[str]]:
    """Return the named list-of-string parameters or raise ValidationError.

    Empty lists are accepted; absent or null values are not.
    """
    if any(params.get(name) is None for name in names):
        quoted = " or ".join(f"'{name}'" for name in names)
        raise ValidationError(f"Missing param {quoted}")

    values = []
    for name in names:
        value = params[name]
        if isinstance(value, str):
            # A single form value
            value = [value]
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValidationError(f"Param '{name}' must be an array of strings")
        values.append(value)
    return values
