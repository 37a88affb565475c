"""Validator Base Classes

Every validator is a callable ``validator(value, context=None) -> bool``
that carries an explicit ``kind``:

- PrimitiveValidator: wraps a plain predicate over one value
- CombinatorValidator: built from other validators (arrays, unions, ...)
- CompositeValidator: validates a mapping against a schema through the
  object validation engine

Usage:
    @primitive()
    def is_even(value) -> bool:
        return isinstance(value, int) and value % 2 == 0

    is_user = CompositeValidator({"name": is_string, "age": is_even})
    is_user({"name": "John", "age": 30})  # True
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, ClassVar, Iterable

from shapeguard.core.errors import SchemaDefinitionError
from .engine import validate_object
from .formatting import format_type_error
from .labels import expected_type_name, label_from_name
from .reporting import report_validation_results
from .result import ValidationResult, create_validation_result
from .schema import MISSING, ErrorMode, ReportingContext, ValidatorKind
from .tree import ROOT_PATH, create_tree_node


class BaseValidator(ABC):
    """Common surface of all validators."""
    kind: ClassVar[ValidatorKind]

    def __init__(self, name: str, expected_type: str | None = None):
        self.__name__ = name
        self.expected_type = expected_type or label_from_name(name)

    @abstractmethod
    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        """Return the verdict; on failure report through ``context`` when given."""

    def _fail(self, value: Any, context: ReportingContext | None) -> bool:
        if context is not None:
            context.report(format_type_error(value, context.identifier, self.expected_type))
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.__name__} expects {self.expected_type!r}>"


class PrimitiveValidator(BaseValidator):
    """Validator for a single value backed by a boolean predicate."""
    kind = ValidatorKind.PRIMITIVE

    def __init__(self, name: str, predicate: Callable[[Any], bool], expected_type: str | None = None):
        super().__init__(name, expected_type)
        self.predicate = predicate
        self.__doc__ = predicate.__doc__

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        return True if self.predicate(value) else self._fail(value, context)


def primitive(name: str | None = None, *, expected_type: str | None = None) -> Callable[[Callable[[Any], bool]], PrimitiveValidator]:
    """Decorator turning a predicate into a primitive validator.

    The validator takes the predicate's name unless ``name`` is given; its
    label follows the ``is_<type>`` convention unless ``expected_type`` is given.
    """
    def decorator(predicate: Callable[[Any], bool]) -> PrimitiveValidator:
        return PrimitiveValidator(name or predicate.__name__, predicate, expected_type)
    return decorator


class CombinatorValidator(BaseValidator):
    """Validator assembled from other validators."""
    kind = ValidatorKind.COMBINATOR

    def __init__(self, name: str, expected_type: str | None = None, validators: Iterable[Any] = ()):
        super().__init__(name, expected_type)
        self.validators = tuple(validators)


class CompositeValidator(BaseValidator):
    """Validator for a mapping whose keys are checked against a schema.

    Schema entries may be validators, nested mappings (turned into nested
    composites) or a one-element list ``[entry]`` meaning "list of entry".
    An ``optional`` composite also accepts a missing key.
    """
    kind = ValidatorKind.COMPOSITE

    def __init__(self, schema: Mapping[str, Any], *, name: str = "is_object", partial: bool = False,
                 optional: bool = False):
        super().__init__(name, "object")
        self.partial, self.optional = partial, optional
        self.schema: dict[str, Any] = {key: _schema_entry(key, entry, partial) for key, entry in schema.items()}

    def validate(self, value: Any, context: ReportingContext | None = None) -> ValidationResult:
        """Validate structurally without invoking any callback."""
        context = context if context is not None else ReportingContext(identifier=ROOT_PATH)
        if self.optional and value is MISSING:
            return create_validation_result(True, (), create_tree_node(context.identifier, True, "object", value))
        return validate_object(value, self.schema, context.silent())

    def __call__(self, value: Any, context: ReportingContext | None = None) -> bool:
        if self.optional and value is MISSING:
            return True
        if context is None:
            return validate_object(value, self.schema, ReportingContext(ROOT_PATH, None, ErrorMode.SINGLE)).valid
        result = validate_object(value, self.schema, context)
        report_validation_results(result, context)
        return result.valid

    def pick(self, *keys: str) -> CompositeValidator:
        """Composite restricted to ``keys``."""
        return self._derive({k: v for k, v in self.schema.items() if k in keys})

    def omit(self, *keys: str) -> CompositeValidator:
        """Composite without ``keys``."""
        return self._derive({k: v for k, v in self.schema.items() if k not in keys})

    def extend(self, schema: Mapping[str, Any]) -> CompositeValidator:
        """Composite with extra (or overriding) keys."""
        return self._derive({**self.schema, **schema})

    def as_optional(self) -> CompositeValidator:
        """Same schema, but a missing key passes."""
        return self._derive(self.schema, optional=True)

    def _derive(self, schema: Mapping[str, Any], optional: bool = False) -> CompositeValidator:
        derived = CompositeValidator({}, name=self.__name__, optional=optional)
        derived.schema = {key: _schema_entry(key, entry, False) for key, entry in schema.items()}
        return derived

    def __repr__(self) -> str:
        return f"<CompositeValidator {self.__name__} keys={list(self.schema)}>"


def _schema_entry(key: str, entry: Any, partial: bool) -> Any:
    """Turn one schema entry into a validator."""
    from .typeguards import is_array_with_each_item, is_undefined_or

    if isinstance(entry, Mapping):
        validator = CompositeValidator(entry)
    elif isinstance(entry, list | tuple) and len(entry) == 1:
        validator = is_array_with_each_item(_schema_entry(f"{key}[]", entry[0], False))
    elif callable(entry):
        validator = entry
    else:
        raise SchemaDefinitionError(key, entry)
    if not partial:
        return validator
    if isinstance(validator, CompositeValidator):
        return validator.as_optional()
    return is_undefined_or(validator)


def labels_of(validators: Iterable[Any]) -> list[str]:
    return [expected_type_name(v) for v in validators]
