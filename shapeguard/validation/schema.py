"""Reporting Context and Validator Contract Types

A validator is any callable ``validator(value, context=None) -> bool``. When
given a context with a callback and the value fails, it reports a message
through the callback before returning False. The engine tells validator
variants apart by their explicit ``kind`` rather than by inspecting names.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from shapeguard.core.config import get_settings


class ErrorMode(str, Enum):
    """How many mismatches are reported, and in which shape."""
    SINGLE = "single"
    MULTI = "multi"
    JSON = "json"


class ValidatorKind(str, Enum):
    """Capability marker carried by every validator."""
    PRIMITIVE = "primitive"
    COMPOSITE = "composite"
    COMBINATOR = "combinator"


class _Missing:
    """Value of a schema key that is absent from the validated mapping."""
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self


MISSING: Any = _Missing()


def _default_error_mode() -> ErrorMode:
    return ErrorMode(get_settings().DEFAULT_ERROR_MODE)


@dataclass(frozen=True, slots=True)
class ReportingContext:
    """Per-call reporting configuration.

    Built once by the caller and handed down read-only. Nested calls get a
    copy whose identifier is extended by ``child`` (``user`` -> ``user.address``)
    or ``item`` (``user.tags`` -> ``user.tags[0]``).
    """
    identifier: str
    callback_on_error: Callable[[str], None] | None = None
    error_mode: ErrorMode = field(default_factory=_default_error_mode)

    def __post_init__(self):
        if not isinstance(self.error_mode, ErrorMode):
            object.__setattr__(self, "error_mode", ErrorMode(self.error_mode))

    def child(self, key: str) -> ReportingContext:
        return replace(self, identifier=f"{self.identifier}.{key}")

    def item(self, index: int) -> ReportingContext:
        return replace(self, identifier=f"{self.identifier}[{index}]")

    def silent(self) -> ReportingContext:
        """Same path and mode, no callback."""
        return replace(self, callback_on_error=None)

    def report(self, message: str) -> None:
        if self.callback_on_error is not None:
            self.callback_on_error(message)


@runtime_checkable
class Validator(Protocol):
    """Structural type of every validator."""

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool: ...


Schema = Mapping[str, Validator]


def validator_kind(validator: Any) -> ValidatorKind:
    """Kind of a validator; plain callables count as primitive."""
    return getattr(validator, "kind", ValidatorKind.PRIMITIVE)


def resolve_error_mode(context: ReportingContext | None) -> ErrorMode:
    return context.error_mode if context is not None else _default_error_mode()
