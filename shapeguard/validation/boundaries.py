"""Validation at System Boundaries

Entry points for validating untrusted data where it enters the system:
- check: structural ValidationResult, no callback involved
- parse: Result monad, Ok(value) or Err(AppError)
- assert_valid: value or raised ValidationError
- collect_errors: callback messages gathered into a list
"""
from __future__ import annotations

from typing import Any, TypeVar

from shapeguard.core.errors import AppError, Err, Ok, Result
from shapeguard.core.logging import boundary_logger
from .errors import ValidationError, create_validation_error
from .labels import expected_type_name
from .result import ValidationResult, create_validation_result
from .schema import ErrorMode, ReportingContext, ValidatorKind, validator_kind
from .tree import create_tree_node

T = TypeVar("T")

DEFAULT_IDENTIFIER = "value"

log = boundary_logger()


def _context(identifier: str, error_mode: ErrorMode | str | None) -> ReportingContext:
    if error_mode is None:
        return ReportingContext(identifier=identifier)
    return ReportingContext(identifier=identifier, error_mode=error_mode)


def check(value: Any, validator: Any, *, identifier: str = DEFAULT_IDENTIFIER,
          error_mode: ErrorMode | str | None = None) -> ValidationResult:
    """Validate without reporting and return the structured result.

    Composite validators yield their full result (tree included). Any other
    validator yields a single node built from its verdict.
    """
    context = _context(identifier, error_mode)
    if validator_kind(validator) is ValidatorKind.COMPOSITE and hasattr(validator, "validate"):
        return validator.validate(value, context)

    expected_type = expected_type_name(validator)
    if validator(value, None):
        return create_validation_result(True, (), create_tree_node(identifier, True, expected_type, value))
    error = create_validation_error(identifier, expected_type, value)
    return create_validation_result(False, [error], create_tree_node(identifier, False, expected_type, value, errors=[error]))


def _rejection(result: ValidationResult, identifier: str, error_mode: ErrorMode | str | None) -> ValidationError:
    mode = _context(identifier, error_mode).error_mode
    details = list(result.errors)
    if not details and result.tree is not None:
        # json mode keeps some mismatches on the tree only
        details = [error for node in result.tree.walk() if node.is_leaf for error in node.errors]
    return ValidationError("Validation failed", details, mode)


def parse(value: T, validator: Any, *, identifier: str = DEFAULT_IDENTIFIER,
          error_mode: ErrorMode | str | None = None) -> Result[T, AppError]:
    """Validate ``value`` and wrap the outcome in a Result."""
    result = check(value, validator, identifier=identifier, error_mode=error_mode)
    if result.valid:
        return Ok(value)
    rejection = _rejection(result, identifier, error_mode)
    log.debug("parse_rejected", identifier=identifier, mode=rejection.mode.value, error_count=len(rejection.details))
    return Err(rejection.to_app_error().with_origin("parse"))


def assert_valid(value: T, validator: Any, *, identifier: str = DEFAULT_IDENTIFIER,
                 error_mode: ErrorMode | str | None = None) -> T:
    """Return ``value`` unchanged or raise ValidationError."""
    result = check(value, validator, identifier=identifier, error_mode=error_mode)
    if result.valid:
        return value
    raise _rejection(result, identifier, error_mode)


def collect_errors(validator: Any, value: Any, *, identifier: str = DEFAULT_IDENTIFIER,
                   error_mode: ErrorMode | str = ErrorMode.MULTI) -> list[str]:
    """Run ``validator`` with a list-appending callback and return the messages."""
    messages: list[str] = []
    validator(value, ReportingContext(identifier=identifier, callback_on_error=messages.append, error_mode=error_mode))
    return messages
