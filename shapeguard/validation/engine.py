"""Object Validation Engine

Schema-driven traversal of nested mappings. Every schema key is validated
by ``validate_property``; ``validate_object`` picks the traversal strategy
from the error mode:

- single: stop at the first failing key (fail-fast)
- multi/json: validate every key and merge the results into one tree

Nothing here reports through the callback. Traversal only produces a
``ValidationResult``; ``report_validation_results`` decides what to surface.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from shapeguard.core.logging import validation_logger
from .errors import NON_NULL_OBJECT, create_validation_error
from .labels import expected_type_name
from .result import ValidationResult, combine_results, create_validation_result
from .schema import MISSING, ErrorMode, ReportingContext, Schema, ValidatorKind, validator_kind
from .tree import create_tree_node

OBJECT = "object"

log = validation_logger()


def is_non_null_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def validate_property(key: str, value: Any, validator: Any, context: ReportingContext) -> ValidationResult:
    """Validate one property and scope the result to ``<context path>.<key>``.

    Composite validators are run structurally with a child context so the
    nested traversal records full paths. Primitive validators and combinators
    are only asked for a verdict; the error and tree node are built here so
    path and expected-type labelling stay in one place.
    """
    property_context = context.child(key)
    path = property_context.identifier

    if validator_kind(validator) is ValidatorKind.COMPOSITE and hasattr(validator, "validate"):
        result = validator.validate(value, property_context.silent())
        if result.tree is None:
            return result
        return replace(result, tree=replace(result.tree, name=key))

    expected_type = expected_type_name(validator)
    if validator(value, None):
        return create_validation_result(True, (), create_tree_node(path, True, expected_type, value, key=key))

    error = create_validation_error(path, expected_type, value)
    return create_validation_result(False, [error], create_tree_node(path, False, expected_type, value, errors=[error], key=key))


def _validate_not_an_object(value: Any, context: ReportingContext) -> ValidationResult:
    error = create_validation_error(context.identifier, NON_NULL_OBJECT, value)
    tree = create_tree_node(context.identifier, False, NON_NULL_OBJECT, value, errors=[error])
    # json mode reports through the tree only
    errors = [] if context.error_mode is ErrorMode.JSON else [error]
    return create_validation_result(False, errors, tree)


def _validate_first_error(value: Mapping, schema: Schema, context: ReportingContext) -> ValidationResult:
    for key, validator in schema.items():
        result = validate_property(key, value.get(key, MISSING), validator, context)
        if not result.valid:
            return result
    return create_validation_result(True, (), create_tree_node(context.identifier, True, OBJECT, value))


def _validate_every_property(value: Mapping, schema: Schema, context: ReportingContext) -> ValidationResult:
    results = [validate_property(key, value.get(key, MISSING), validator, context)
        for key, validator in schema.items()]
    return combine_results(results, context.identifier, expected_type=OBJECT, actual_value=value)


def validate_object(value: Any, schema: Schema, context: ReportingContext) -> ValidationResult:
    """Validate ``value`` against ``schema`` under ``context``.

    Args:
        value: Untrusted value, expected to be a mapping
        schema: Property name -> validator, iterated in declaration order
        context: Supplies the path prefix and the error mode

    Returns:
        ValidationResult; in single mode at most one error, in multi mode one
        per failing leaf in schema order, in json mode a full tree
    """
    if not is_non_null_object(value):
        result = _validate_not_an_object(value, context)
    elif context.error_mode is ErrorMode.SINGLE:
        result = _validate_first_error(value, schema, context)
    else:
        result = _validate_every_property(value, schema, context)

    log.debug("object_validated", path=context.identifier, mode=context.error_mode.value,
        valid=result.valid, error_count=len(result.errors))
    return result
