"""
Request body serialization tools

Provides form-urlencoded and JSON encoding of request bodies.
"""

import json
import dataclasses
from typing import Any, Mapping
from urllib.parse import urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def encode_form(value: Any) -> str:
    """Encode a value as an application/x-www-form-urlencoded string

    Args:
        value: Mapping, sequence of (key, value) pairs or dataclass instance.
            Sequence values are repeated under the same key.

    Returns:
        str: Encoded form body

    Raises:
        TypeError: If the value has no form representation
    """
    value = _plain(value)
    if isinstance(value, Mapping):
        pairs = list(value.items())
    elif isinstance(value, (list, tuple)):
        pairs = list(value)
    else:
        raise TypeError(f"Cannot form-encode {type(value).__name__}")

    return urlencode([(k, v) for k, v in pairs if v is not None], doseq=True)


def encode_json(value: Any) -> bytes:
    """Encode a value as a UTF-8 JSON document

    Args:
        value: JSON-serializable value or dataclass instance

    Returns:
        bytes: Encoded JSON body

    Raises:
        TypeError: If the value is not JSON serializable
    """
    return json.dumps(_plain(value), separators=(",", ":")).encode("utf-8")
