"""Helpers for cleaning up JSON documents."""

from __future__ import annotations

import json
from typing import Any

__all__ = ["trim_null"]

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _trim(value: Any) -> Any:
    if isinstance(value, list):
        return [item for item in map(_trim, value) if item is not None]
    if isinstance(value, dict):
        trimmed = ((key, _trim(item)) for key, item in value.items())
        return {key: item for key, item in trimmed if item is not None}
    return value


def _encode(value: Any) -> bytes:
    text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def trim_null(data: bytes | str | None) -> bytes:
    """Return compact JSON with every null value removed from objects and arrays.

    Object keys come out sorted. Raises ValueError when data is None or is
    not valid JSON.
    """
    if data is None:
        raise ValueError("input data can't be None")
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    document = json.loads(data)
    return _encode(_trim(document))