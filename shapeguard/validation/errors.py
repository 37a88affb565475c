"""Validation Error Records

One ``ValidationErrorDetail`` is created per failing check and never
mutated. ``ValidationError`` wraps a list of them for callers that prefer
exceptions over inspecting a ``ValidationResult``.

Detail format:
{
    "field": "user.address.zipCode",
    "expected_type": "number",
    "value": "1234",
    "message": "Expected user.address.zipCode (\"1234\") to be \"number\""
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapeguard.core.errors import AppError, ErrorCode
from .formatting import format_type_error
from .schema import MISSING, ErrorMode

NON_NULL_OBJECT = "non-null object"


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """A single mismatch.

    - field_path: fully qualified path (e.g. "user.addresses[0].street")
    - expected_type: label of the type the validator expected
    - actual_value: the value that failed (MISSING for an absent key)
    - message: human-readable message
    """
    field_path: str
    expected_type: str
    actual_value: Any = MISSING
    message: str = ""

    @property
    def is_missing(self) -> bool:
        return self.actual_value is MISSING

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        result = {"field": self.field_path, "expected_type": self.expected_type, "message": self.message}
        if not self.is_missing: result["value"] = self.actual_value
        return result


def create_validation_error(path: str, expected_type: str, value: Any, message: str | None = None) -> ValidationErrorDetail:
    """Build a detail, rendering the standard message unless one is given."""
    return ValidationErrorDetail(field_path=path, expected_type=expected_type, actual_value=value,
        message=message if message is not None else format_type_error(value, path, expected_type))


class ValidationError(Exception):
    """Raised by ``assert_valid`` when a value does not match its validator."""

    def __init__(self, message: str, details: list[ValidationErrorDetail], mode: ErrorMode = ErrorMode.SINGLE):
        super().__init__(message)
        self.message, self.details, self.mode = message, details, mode

    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1: return self.details[0].message
        return f"{self.message} ({len(self.details)} errors)"

    @property
    def first_error(self) -> ValidationErrorDetail | None: return self.details[0] if self.details else None

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        """Group errors by field path."""
        result: dict[str, list[ValidationErrorDetail]] = {}
        for detail in self.details: result.setdefault(detail.field_path, []).append(detail)
        return result

    def to_app_error(self) -> AppError:
        """Convert to AppError for Result-based callers."""
        if len(self.details) == 1:
            d = self.details[0]
            code = (ErrorCode.E2006_NOT_AN_OBJECT if d.expected_type == NON_NULL_OBJECT
                else ErrorCode.E2001_REQUIRED_FIELD_MISSING if d.is_missing
                else ErrorCode.E2004_INVALID_TYPE)
            return AppError(code=code, message=d.message, metadata=d.to_dict())
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"{self.message}: {len(self.details)} errors",
            metadata={"error_mode": self.mode.value, "error_count": len(self.details),
                "errors": [d.to_dict() for d in self.details]})
