"""Diagnostic message rendering."""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from pydantic_core import to_json

from shapeguard.core.config import get_settings
from .schema import MISSING


def stringify(value: Any) -> str:
    """Render a value as compact JSON for diagnostics.

    Values JSON cannot express get a fixed spelling: ``undefined`` for a
    missing key, ``function``, ``Error``, ``NaN`` and ``Infinity``.
    """
    if value is MISSING:
        return "undefined"
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, BaseException):
        return "Error"
    if callable(value) and not isinstance(value, type):
        return "function"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    try:
        return to_json(value, fallback=_fallback, inf_nan_mode="constants").decode()
    except ValueError:
        # PydanticSerializationError (undecodable bytes) or a circular reference
        return repr(value)


def _fallback(value: Any) -> Any:
    if value is MISSING:
        return None
    return repr(value)


def format_type_error(value: Any, identifier: str, expected_type: str) -> str:
    """``Expected <identifier> (<value>) to be "<expected_type>"``.

    The rendered value and its parentheses are left out when the rendering is
    longer than ``Settings.MESSAGE_VALUE_MAX_LENGTH``.
    """
    rendered = stringify(value)
    if len(rendered) > get_settings().MESSAGE_VALUE_MAX_LENGTH:
        return f'Expected {identifier} to be "{expected_type}"'
    return f'Expected {identifier} ({rendered}) to be "{expected_type}"'


def to_json_text(payload: Any, indent: int | None = None) -> str:
    """Serialize a payload built from validated values, tolerating non-JSON types."""
    return to_json(payload, indent=indent, fallback=_fallback, inf_nan_mode="constants").decode()


def json_safe(value: Any) -> Any:
    """``value`` itself when it serializes to JSON, otherwise its rendering."""
    try:
        to_json(value, fallback=_fallback, inf_nan_mode="constants")
    except ValueError:
        return stringify(value)
    return value
