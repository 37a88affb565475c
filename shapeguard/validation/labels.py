"""Expected-type labels for validators."""
from __future__ import annotations

from typing import Any

from .schema import ValidatorKind, validator_kind

NAME_PREFIX = "is_"
UNKNOWN = "unknown"

# Labels that keep their casing
_PRESERVED_LABELS = {"array": "Array"}


def label_from_name(name: Any) -> str:
    """``is_string`` -> ``"string"``; names without the ``is_`` prefix -> ``"unknown"``."""
    if not isinstance(name, str) or not name.startswith(NAME_PREFIX) or len(name) == len(NAME_PREFIX):
        return UNKNOWN
    label = name[len(NAME_PREFIX):].lower()
    return _PRESERVED_LABELS.get(label, label)


def expected_type_name(validator: Any) -> str:
    """Best-effort display name of the type a validator expects.

    Composites are always ``"object"``. Otherwise an explicit
    ``expected_type`` attribute wins, then the ``is_<type>`` naming
    convention, then ``"unknown"``. Never raises.
    """
    if validator_kind(validator) is ValidatorKind.COMPOSITE:
        return "object"
    explicit = getattr(validator, "expected_type", None)
    if isinstance(explicit, str) and explicit:
        return explicit
    return label_from_name(getattr(validator, "__name__", None))
