"""JSON response and URL parameter helpers."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from werkzeug.wrappers import Response

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_HTML_ESCAPES = {
    "&": "\\u0026",
    "<": "\\u003c",
    ">": "\\u003e",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class InvalidIDError(ValueError):
    """Raised when a URL id parameter is missing or not an integer."""


def _encode_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _dumps(data: Mapping[str, Any]) -> str:
    text = json.dumps(
        data, indent=1, sort_keys=True, ensure_ascii=False, default=_encode_default
    )
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text + "\n"


def write_json(status: int, data: Mapping[str, Any]) -> Response:
    """Build an application/json response with the data indented by one space."""
    return Response(_dumps(data), status=status, content_type="application/json")


def read_id_param(params: Mapping[str, str]) -> int:
    """Return the "id" URL parameter as a signed 64-bit integer."""
    raw = params.get("id", "")
    if not raw:
        raise InvalidIDError("invalid id parameters")
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidIDError("invalid id parameters type")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidIDError("invalid id parameters type")
    return value