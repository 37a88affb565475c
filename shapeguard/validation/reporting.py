"""Result reporting through the caller's error callback."""
from __future__ import annotations

from shapeguard.core.config import get_settings
from .formatting import to_json_text
from .result import ValidationResult
from .schema import ErrorMode, ReportingContext
from .tree import create_simplified_tree


def _report_single(result: ValidationResult, context: ReportingContext) -> None:
    if result.errors:
        context.report(result.errors[0].message)


def _report_multi(result: ValidationResult, context: ReportingContext) -> None:
    for error in result.errors:
        context.report(error.message)


def _report_json(result: ValidationResult, context: ReportingContext) -> None:
    payload = create_simplified_tree(result.tree)
    context.report(to_json_text(payload, indent=get_settings().JSON_TREE_INDENT))


def report_validation_results(result: ValidationResult, context: ReportingContext | None) -> None:
    """Invoke ``context.callback_on_error`` zero, one or many times.

    Nothing is reported for a valid result or without a callback. In json
    mode a result without a tree falls back to single-mode reporting.
    """
    if result.valid or context is None or context.callback_on_error is None:
        return

    if context.error_mode is ErrorMode.JSON and result.tree is not None:
        _report_json(result, context)
    elif context.error_mode is ErrorMode.MULTI:
        _report_multi(result, context)
    else:
        _report_single(result, context)
