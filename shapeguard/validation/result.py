"""Validation Result

The value exchanged between traversal steps, and the combiner that merges
per-property results into a whole-object result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from .errors import ValidationErrorDetail
from .schema import MISSING
from .tree import ROOT_PATH, ValidationTree, create_tree_node


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one value.

    ``errors`` holds the mismatches actually collected, whose number depends
    on the error mode; ``tree`` is the diagnostic tree when one was built.
    """
    valid: bool
    errors: tuple[ValidationErrorDetail, ...] = ()
    tree: ValidationTree | None = None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def first_error(self) -> ValidationErrorDetail | None: return self.errors[0] if self.errors else None

    @property
    def messages(self) -> list[str]: return [e.message for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        if self.valid: return {"valid": True}
        return {"valid": False, "errors": [e.to_dict() for e in self.errors]}


def create_validation_result(
    valid: bool,
    errors: Iterable[ValidationErrorDetail] = (),
    tree: ValidationTree | None = None,
) -> ValidationResult:
    return ValidationResult(valid=valid, errors=tuple(errors), tree=tree)


def combine_results(
    results: Sequence[ValidationResult],
    parent_path: str | None = None,
    *,
    expected_type: str | None = None,
    actual_value: Any = MISSING,
) -> ValidationResult:
    """Merge per-property results into one whole-object result.

    Validity is the AND of the inputs and errors are concatenated in input
    order. The new parent node gets one child per input that carries a tree,
    keyed by the last segment of that child's path.
    """
    valid = all(r.valid for r in results)
    errors = [error for r in results for error in r.errors]
    tree = create_tree_node(
        parent_path or ROOT_PATH,
        valid,
        expected_type,
        actual_value,
        children=[r.tree for r in results if r.tree is not None],
        errors=errors,
    )
    return create_validation_result(valid, errors, tree)
