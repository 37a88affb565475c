"""Object Validation and Error Reporting

Validators decide whether an untrusted value matches a declared shape.
Schema composites walk nested mappings; the error mode decides what the
caller's callback hears about mismatches.

Key Features:
- Three error modes: single (fail-fast), multi (every mismatch), json (tree)
- Dotted/bracketed paths to every failure at any nesting depth
- Immutable results and diagnostic trees built bottom-up
- Explicit validator kinds (primitive, combinator, composite)
- Boundary helpers returning Result values or raising ValidationError

Usage:
    from shapeguard.validation import (
        is_type, is_string, is_number, ReportingContext, ErrorMode,
    )

    is_user = is_type({"name": is_string, "age": is_number})

    errors = []
    is_user(payload, ReportingContext("user", errors.append, ErrorMode.MULTI))
"""

# Contract types
from .schema import (
    MISSING,
    ErrorMode,
    ReportingContext,
    Schema,
    Validator,
    ValidatorKind,
    validator_kind,
)

# Diagnostics
from .formatting import stringify, format_type_error
from .labels import expected_type_name

# Results
from .errors import ValidationErrorDetail, ValidationError, create_validation_error
from .tree import ValidationTree, create_tree_node, create_simplified_tree
from .result import ValidationResult, create_validation_result, combine_results

# Traversal and reporting
from .engine import validate_object, validate_property
from .reporting import report_validation_results

# Validators
from .validators import (
    BaseValidator,
    PrimitiveValidator,
    CombinatorValidator,
    CompositeValidator,
    primitive,
)
from .typeguards import (
    # Primitives
    is_string,
    is_number,
    is_integer,
    is_boolean,
    is_date,
    is_none,
    is_nil,
    is_defined,
    is_any,
    is_unknown,
    is_non_null_object,
    is_array,
    is_non_empty_array,
    is_map,
    is_set,
    is_function,
    is_regex,
    is_error,
    is_non_empty_string,
    is_positive_number,
    is_non_negative_number,
    is_negative_number,
    is_non_positive_number,
    is_positive_integer,
    is_negative_integer,
    is_non_negative_integer,
    is_non_positive_integer,
    # Combinators
    is_array_with_each_item,
    is_non_empty_array_with_each_item,
    is_object_with_each_item,
    is_tuple,
    is_pattern,
    is_one_of_types,
    is_intersection_of,
    is_one_of,
    is_equal_to,
    is_none_or,
    is_undefined_or,
    is_nil_or,
    is_enum,
    is_instance_of,
    # Composites
    is_type,
    is_schema,
    is_partial_of,
)

# Boundaries
from .boundaries import check, parse, assert_valid, collect_errors

__all__ = [
    # Contract
    "MISSING",
    "ErrorMode",
    "ReportingContext",
    "Schema",
    "Validator",
    "ValidatorKind",
    "validator_kind",
    # Diagnostics
    "stringify",
    "format_type_error",
    "expected_type_name",
    # Results
    "ValidationErrorDetail",
    "ValidationError",
    "create_validation_error",
    "ValidationTree",
    "create_tree_node",
    "create_simplified_tree",
    "ValidationResult",
    "create_validation_result",
    "combine_results",
    # Traversal
    "validate_object",
    "validate_property",
    "report_validation_results",
    # Validators
    "BaseValidator",
    "PrimitiveValidator",
    "CombinatorValidator",
    "CompositeValidator",
    "primitive",
    "is_string",
    "is_number",
    "is_integer",
    "is_boolean",
    "is_date",
    "is_none",
    "is_nil",
    "is_defined",
    "is_any",
    "is_unknown",
    "is_non_null_object",
    "is_array",
    "is_non_empty_array",
    "is_map",
    "is_set",
    "is_function",
    "is_regex",
    "is_error",
    "is_non_empty_string",
    "is_positive_number",
    "is_non_negative_number",
    "is_negative_number",
    "is_non_positive_number",
    "is_positive_integer",
    "is_negative_integer",
    "is_non_negative_integer",
    "is_non_positive_integer",
    "is_array_with_each_item",
    "is_non_empty_array_with_each_item",
    "is_object_with_each_item",
    "is_tuple",
    "is_pattern",
    "is_one_of_types",
    "is_intersection_of",
    "is_one_of",
    "is_equal_to",
    "is_none_or",
    "is_undefined_or",
    "is_nil_or",
    "is_enum",
    "is_instance_of",
    "is_type",
    "is_schema",
    "is_partial_of",
    # Boundaries
    "check",
    "parse",
    "assert_valid",
    "collect_errors",
]
