"""Built-in Validators

Primitive checks for single values, combinators assembled from other
validators, and the ``is_type`` family of schema composites.
"""
from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from dataclasses import replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable

from shapeguard.core.config import get_settings
from .formatting import stringify
from .labels import expected_type_name
from .schema import MISSING, ErrorMode, ReportingContext
from .validators import CombinatorValidator, CompositeValidator, labels_of, primitive


# ============================================================================
# Primitives
# ============================================================================

@primitive()
def is_string(value: Any) -> bool:
    return isinstance(value, str)


@primitive()
def is_number(value: Any) -> bool:
    """Real number; booleans and NaN are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


@primitive()
def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@primitive()
def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


@primitive()
def is_date(value: Any) -> bool:
    return isinstance(value, datetime | date)


@primitive(expected_type="null")
def is_none(value: Any) -> bool:
    return value is None


@primitive(expected_type="null | undefined")
def is_nil(value: Any) -> bool:
    return value is None or value is MISSING


@primitive()
def is_defined(value: Any) -> bool:
    return value is not MISSING and value is not None


@primitive()
def is_any(value: Any) -> bool:
    return True


@primitive()
def is_unknown(value: Any) -> bool:
    return True


@primitive(expected_type="non-null object")
def is_non_null_object(value: Any) -> bool:
    return isinstance(value, Mapping)


@primitive()
def is_array(value: Any) -> bool:
    return isinstance(value, list | tuple)


@primitive(expected_type="non-empty Array")
def is_non_empty_array(value: Any) -> bool:
    return isinstance(value, list | tuple) and len(value) > 0


@primitive(expected_type="Map")
def is_map(value: Any) -> bool:
    return isinstance(value, Mapping)


@primitive()
def is_set(value: Any) -> bool:
    return isinstance(value, set | frozenset)


@primitive()
def is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


@primitive()
def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


@primitive()
def is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


@primitive(expected_type="non-empty string")
def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


@primitive(expected_type="positive number")
def is_positive_number(value: Any) -> bool:
    return is_number(value) and value > 0


@primitive(expected_type="non-negative number")
def is_non_negative_number(value: Any) -> bool:
    return is_number(value) and value >= 0


@primitive(expected_type="negative number")
def is_negative_number(value: Any) -> bool:
    return is_number(value) and value < 0


@primitive(expected_type="non-positive number")
def is_non_positive_number(value: Any) -> bool:
    return is_number(value) and value <= 0


@primitive(expected_type="positive integer")
def is_positive_integer(value: Any) -> bool:
    return is_integer(value) and value > 0


@primitive(expected_type="negative integer")
def is_negative_integer(value: Any) -> bool:
    return is_integer(value) and value < 0


@primitive(expected_type="non-negative integer")
def is_non_negative_integer(value: Any) -> bool:
    return is_integer(value) and value >= 0


@primitive(expected_type="non-positive integer")
def is_non_positive_integer(value: Any) -> bool:
    return is_integer(value) and value <= 0


# ============================================================================
# Combinators
# ============================================================================

class ArrayWithEachItem(CombinatorValidator):
    """List or tuple whose every item passes ``item``.

    Single mode stops at the first failing item; other modes report every one.
    """

    def __init__(self, item: Any, *, non_empty: bool = False):
        super().__init__("is_non_empty_array" if non_empty else "is_array",
            "non-empty Array" if non_empty else "Array", (item,))
        self.item, self.non_empty = item, non_empty

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if not isinstance(value, list | tuple) or (self.non_empty and not value):
            return self._fail(value, context)
        return _every(context, (self.item(entry, context.item(i) if context else None) for i, entry in enumerate(value)))


class ObjectWithEachItem(CombinatorValidator):
    """Mapping whose every value passes ``item``; keys are not constrained."""

    def __init__(self, item: Any):
        super().__init__("is_object_with_each_item", "object", (item,))
        self.item = item

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if not isinstance(value, Mapping):
            return self._fail(value, context)
        return _every(context, (self.item(entry, context.child(str(key)) if context else None)
            for key, entry in value.items()))


class TupleOf(CombinatorValidator):
    """Fixed-length list or tuple, position ``i`` checked by ``validators[i]``."""

    def __init__(self, *validators: Any):
        super().__init__("is_tuple", "[" + ", ".join(labels_of(validators)) + "]", validators)

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if not isinstance(value, list | tuple) or len(value) != len(self.validators):
            return self._fail(value, context)
        return _every(context, (v(entry, context.item(i) if context else None)
            for i, (v, entry) in enumerate(zip(self.validators, value))))


class PatternMatch(CombinatorValidator):
    """String in which ``pattern`` is found (``re.search``)."""

    def __init__(self, pattern: str | re.Pattern):
        self.pattern = re.compile(pattern)
        super().__init__("is_pattern", f"string matching /{self.pattern.pattern}/")

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if isinstance(value, str) and self.pattern.search(value):
            return True
        return self._fail(value, context)


class OneOfTypes(CombinatorValidator):
    """Union: at least one validator passes.

    On failure one message is reported: a headline naming the alternatives
    followed by one ``- `` line per distinct message from the alternatives.
    """

    def __init__(self, *validators: Any):
        labels = labels_of(validators)
        super().__init__("is_" + " | ".join(labels), " | ".join(labels), validators)

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if any(v(value, None) for v in self.validators):
            return True
        if context is not None and context.callback_on_error is not None:
            context.report(self._describe(value, context))
        return False

    def _describe(self, value: Any, context: ReportingContext) -> str:
        rendered = stringify(value)
        display = (context.identifier if len(rendered) > get_settings().MESSAGE_VALUE_MAX_LENGTH
            else f"{context.identifier} ({rendered})")
        messages = [f'Expected {display} type to match one of "{self.expected_type}"']

        def collect(message: str) -> None:
            if (line := f"- {message}") not in messages:
                messages.append(line)

        for v in self.validators:
            v(value, replace(context, callback_on_error=collect))
        return "\n".join(messages)


class IntersectionOf(CombinatorValidator):
    """Every validator passes; reports through the first one that fails."""

    def __init__(self, *validators: Any):
        labels = labels_of(validators)
        super().__init__("is_" + " & ".join(labels), " & ".join(labels), validators)

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        return all(v(value, context) for v in self.validators)


class OneOf(CombinatorValidator):
    """Value equal to one of a fixed set of literals."""

    def __init__(self, *values: Any):
        super().__init__("is_one_of", " | ".join(stringify(v) for v in values))
        self.values = values

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        return True if any(_same(value, v) for v in self.values) else self._fail(value, context)


class EqualTo(CombinatorValidator):
    def __init__(self, expected: Any):
        super().__init__("is_equal_to", stringify(expected))
        self.expected = expected

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        return True if _same(value, self.expected) else self._fail(value, context)


class OrAbsent(CombinatorValidator):
    """Lets ``None`` and/or a missing key through, otherwise defers to ``inner``."""

    def __init__(self, inner: Any, *, allow_none: bool, allow_missing: bool):
        suffixes = [s for s, on in (("null", allow_none), ("undefined", allow_missing)) if on]
        label = " | ".join([expected_type_name(inner), *suffixes])
        super().__init__("is_" + label, label, (inner,))
        self.inner, self.allow_none, self.allow_missing = inner, allow_none, allow_missing

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if (self.allow_none and value is None) or (self.allow_missing and value is MISSING):
            return True
        return self.inner(value, context)


class EnumMember(CombinatorValidator):
    """A member of ``enum_cls`` or the value of one."""

    def __init__(self, enum_cls: type[Enum]):
        super().__init__("is_enum", enum_cls.__name__)
        self.enum_cls = enum_cls
        self._values = [member.value for member in enum_cls]

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if isinstance(value, self.enum_cls) or any(_same(value, v) for v in self._values):
            return True
        return self._fail(value, context)


class InstanceOf(CombinatorValidator):
    def __init__(self, cls: type):
        super().__init__("is_instance_of", cls.__name__)
        self.cls = cls

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        return True if isinstance(value, self.cls) else self._fail(value, context)


def _every(context: ReportingContext | None, checks: Iterable[bool]) -> bool:
    """``all(checks)``, without short-circuiting outside single mode."""
    if context is None or context.error_mode is ErrorMode.SINGLE:
        return all(checks)
    return all(list(checks))


def _same(left: Any, right: Any) -> bool:
    # 1 == True in Python; literals of different types never match
    return type(left) is type(right) and left == right


def is_array_with_each_item(item: Any) -> ArrayWithEachItem:
    return ArrayWithEachItem(item)


def is_non_empty_array_with_each_item(item: Any) -> ArrayWithEachItem:
    return ArrayWithEachItem(item, non_empty=True)


def is_tuple(*validators: Any) -> TupleOf:
    return TupleOf(*validators)


def is_pattern(pattern: str | re.Pattern) -> PatternMatch:
    return PatternMatch(pattern)


def is_object_with_each_item(item: Any) -> ObjectWithEachItem:
    return ObjectWithEachItem(item)


def is_one_of_types(*validators: Any) -> OneOfTypes:
    return OneOfTypes(*validators)


def is_intersection_of(*validators: Any) -> IntersectionOf:
    return IntersectionOf(*validators)


def is_one_of(*values: Any) -> OneOf:
    return OneOf(*values)


def is_equal_to(expected: Any) -> EqualTo:
    return EqualTo(expected)


def is_none_or(inner: Any) -> OrAbsent:
    return OrAbsent(inner, allow_none=True, allow_missing=False)


def is_undefined_or(inner: Any) -> OrAbsent:
    return OrAbsent(inner, allow_none=False, allow_missing=True)


def is_nil_or(inner: Any) -> OrAbsent:
    return OrAbsent(inner, allow_none=True, allow_missing=True)


def is_enum(enum_cls: type[Enum]) -> EnumMember:
    return EnumMember(enum_cls)


def is_instance_of(cls: type) -> InstanceOf:
    return InstanceOf(cls)


# ============================================================================
# Composites
# ============================================================================

def is_type(schema: Mapping[str, Any], *, name: str = "is_object") -> CompositeValidator:
    """Composite validator for mappings shaped like ``schema``.

    Usage:
        is_user = is_type({
            "name": is_string,
            "address": {"street": is_string, "zip_code": is_number},
            "tags": [is_string],
        })
    """
    return CompositeValidator(schema, name=name)


is_schema = is_type


def is_partial_of(schema: Mapping[str, Any], *, name: str = "is_object") -> CompositeValidator:
    """Like ``is_type`` but every key may be absent."""
    return CompositeValidator(schema, name=name, partial=True)
