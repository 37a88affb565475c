"""Validation Tree

A tree mirroring the validated value: one node per validated property,
annotated with its verdict. Nodes are built bottom-up and are immutable
once built; a parent owns its children.

JSON wire format (json error mode). Children are keyed by their schema
key, so a key containing "." keeps its own entry:
{
    "user": {
        "valid": false,
        "value": {
            "name": {"valid": true, "value": "John", "expectedType": "string"},
            "profile": {
                "valid": false,
                "value": {
                    "age": {"valid": false, "value": "25", "expectedType": "number"}
                }
            }
        }
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .errors import ValidationErrorDetail
from .formatting import json_safe
from .schema import MISSING

ROOT_PATH = "root"


def last_segment(path: str) -> str:
    """``user.address.zipCode`` -> ``zipCode``; ``user.tags[0]`` -> ``tags[0]``."""
    return path.rsplit(".", 1)[-1] or ROOT_PATH


@dataclass(frozen=True, slots=True)
class ValidationTree:
    """One node of the validation tree."""
    path: str
    valid: bool
    expected_type: str | None = None
    actual_value: Any = MISSING
    children: Mapping[str, ValidationTree] = field(default_factory=lambda: MappingProxyType({}))
    errors: tuple[ValidationErrorDetail, ...] = ()
    name: str | None = None

    @property
    def key(self) -> str:
        """Schema key of this node; falls back to the last path segment."""
        return self.name if self.name is not None else last_segment(self.path)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def find(self, path: str) -> ValidationTree | None:
        """Look up a descendant by its full path."""
        if path == self.path:
            return self
        for child in self.children.values():
            if path == child.path or path.startswith(child.path + ".") or path.startswith(child.path + "["):
                return child.find(path)
        return None

    def walk(self) -> Iterable[ValidationTree]:
        """Depth-first pre-order traversal."""
        yield self
        for child in self.children.values():
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return {self.key: _simplify(self)}


def create_tree_node(
    path: str,
    valid: bool,
    expected_type: str | None = None,
    actual_value: Any = MISSING,
    *,
    children: Iterable[ValidationTree] = (),
    errors: Iterable[ValidationErrorDetail] = (),
    key: str | None = None,
) -> ValidationTree:
    """Build a node; children are keyed by their own ``key``."""
    return ValidationTree(
        path=path,
        valid=valid,
        expected_type=expected_type or None,
        actual_value=actual_value,
        children=MappingProxyType({child.key: child for child in children}),
        errors=tuple(errors),
        name=key,
    )


def _simplify(node: ValidationTree) -> dict[str, Any]:
    if node.children:
        return {"valid": node.valid, "value": {key: _simplify(child) for key, child in node.children.items()}}
    entry: dict[str, Any] = {"valid": node.valid}
    if node.actual_value is not MISSING:
        entry["value"] = json_safe(node.actual_value)
    if node.expected_type:
        entry["expectedType"] = node.expected_type
    return entry


def create_simplified_tree(tree: ValidationTree) -> dict[str, Any]:
    """Flatten a tree into the plain nested mapping emitted in json mode."""
    return tree.to_dict()
