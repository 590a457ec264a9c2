"""JSON value model shared by extraction, diffing and formatting.

Payloads stay as the plain Python values `json.loads` produces. Every
comparison or traversal switches on the `JSONKind` tag returned by
`json_kind` instead of ad-hoc isinstance checks, and `MISSING` marks a key
that is absent (as opposed to present with a JSON `null`).
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, List, Union

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, List[Any], Dict[str, Any]]
UserRecord = Dict[str, JSONValue]


class _Missing:
    """Sentinel for a key that is not present on one side."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class JSONKind(Enum):
    ABSENT = "absent"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def json_kind(value: Any) -> JSONKind:
    """Tag a decoded JSON value with its kind.

    `bool` is checked before numbers since it subclasses `int`. Tuples are
    treated as sequences so hand-built records behave like decoded ones.
    """
    if value is MISSING:
        return JSONKind.ABSENT
    if value is None:
        return JSONKind.NULL
    if isinstance(value, bool):
        return JSONKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JSONKind.NUMBER
    if isinstance(value, str):
        return JSONKind.STRING
    if isinstance(value, (list, tuple)):
        return JSONKind.SEQUENCE
    if isinstance(value, dict):
        return JSONKind.MAPPING
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _normalize_numbers(value: Any) -> Any:
    # Integral floats print as ints, so 1.0 and 1e2 serialize like 1 and 100.
    kind = json_kind(value)
    if kind is JSONKind.NUMBER and isinstance(value, float) and value.is_integer():
        return int(value)
    if kind is JSONKind.SEQUENCE:
        return [_normalize_numbers(item) for item in value]
    if kind is JSONKind.MAPPING:
        return {key: _normalize_numbers(item) for key, item in value.items()}
    return value


def serialize_sequence(value: Any) -> str:
    """Compact JSON used to compare sequences; key and element order matter."""
    return json.dumps(_normalize_numbers(value), ensure_ascii=False, separators=(',', ':'))


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def loads_strict(text: str) -> Any:
    """`json.loads` that refuses NaN / Infinity like a browser JSON parser."""
    return json.loads(text, parse_constant=_reject_constant)
