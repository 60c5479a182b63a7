"""
JsonRenderer — Canonical JSON encoding

The encoding is stable so callers can snapshot it:
- Two-space indentation (or a single line in compact mode)
- Records keep their declared field order, under their aliases
- Mapping keys are sorted
- Output ends with a newline

Values with no JSON form (sets, complex numbers, NaN, arbitrary objects,
mapping keys that are not str or int) raise EncodingError.
"""

import base64
import datetime
import json
import uuid
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, Union

from .base import BaseRenderer
from ..errors import EncodingError
from ..presentation.headers import record_items
from ..presentation.values import Kind, classify, is_namedtuple


INDENT = 2


class JsonRenderer(BaseRenderer):
    """
    Render data as canonical JSON.

    Useful for:
    - Piping to jq or other tools
    - Snapshot tests
    - Machine-readable output
    """

    name = "json"

    def __init__(self, *args, compact: bool = False, **kwargs):
        """
        Initialize JSON renderer.

        Args:
            compact: If True, output single line (no indentation)
            *args, **kwargs: Passed to BaseRenderer
        """
        super().__init__(*args, **kwargs)
        self.compact = compact

    def render(self, value: Any) -> str:
        """
        Render a value as JSON.

        Raises:
            EncodingError: If the value holds something JSON cannot represent
        """
        try:
            data = to_jsonable(value)
            return dumps(data, compact=self.compact)
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"failed to encode JSON: {e}") from e


def dumps(data: Any, compact: bool = False) -> str:
    """Serialize already JSON-ready data, keeping its key order."""
    if compact:
        text = json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    else:
        text = json.dumps(data, indent=INDENT, ensure_ascii=False, allow_nan=False)
    return text + "\n"


def decode_json(raw: Union[str, bytes, bytearray]) -> Any:
    """
    Parse a JSON document, preserving its key order.

    Raises:
        EncodingError: If raw is not valid UTF-8 JSON
    """
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = bytes(raw).decode("utf-8")
        return json.loads(raw)
    except ValueError as e:
        raise EncodingError(f"invalid JSON: {e}") from e


def reformat_json(raw: Union[str, bytes, bytearray], compact: bool = False) -> str:
    """Re-indent an encoded JSON document without reordering its keys."""
    return dumps(decode_json(raw), compact=compact)


# =============================================================================
# Conversion to JSON-ready data
# =============================================================================

def to_jsonable(value: Any) -> Any:
    """
    Convert a value to plain JSON-ready data.

    Raises:
        TypeError: If the value (or a nested value) has no JSON form
    """
    kind, value = classify(value)

    if kind is Kind.ABSENT:
        return None
    if kind is Kind.SCALAR:
        return _scalar(value)
    if kind is Kind.RECORD:
        return _record(value)
    if kind is Kind.MAPPING:
        return _mapping(value)
    if kind is Kind.SEQUENCE:
        if isinstance(value, Set):
            raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
        return [to_jsonable(item) for item in value]
    return _opaque(value)


def _scalar(value: Any) -> Any:
    if isinstance(value, complex):
        raise TypeError("Object of type complex is not JSON serializable")
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def _record(record: Any) -> Dict[str, Any]:
    result = {}
    for spec, field_value in record_items(record):
        if spec.skip_json:
            continue
        if spec.omit_empty and _is_empty(field_value):
            continue
        result[spec.display] = to_jsonable(field_value)
    return result


def _mapping(mapping: Mapping) -> Dict[str, Any]:
    entries = {}
    for key, item in mapping.items():
        entries[_key(key)] = to_jsonable(item)
    return {key: entries[key] for key in sorted(entries)}


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"keys must be str or int, not {type(key).__name__}")


def _opaque(value: Any) -> Any:
    if isinstance(value, Enum):
        return to_jsonable(value.value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (uuid.UUID, Decimal, PurePath)):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _is_empty(value: Any) -> bool:
    """Empty in the omit-if-empty sense: None, False, zero, or zero length."""
    kind, value = classify(value)
    if kind is Kind.ABSENT:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if is_namedtuple(value):
        return False
    if isinstance(value, (str, bytes, bytearray, Mapping, Sequence, Set)):
        return len(value) == 0
    return False
