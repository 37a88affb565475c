"""Monadic Error Handling Types

Result/Either types for callers that want validation outcomes as values
instead of exceptions. Mismatches found while traversing a value are data
(see ``shapeguard.validation.result``); these types carry them across the
boundary helpers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error code taxonomy.

    E2000-E2029: mismatches found in a validated value
    E2030+: malformed schema declarations
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2004_INVALID_TYPE = 2004
    E2006_NOT_AN_OBJECT = 2006
    E2030_INVALID_SCHEMA = 2030

    @property
    def category(self) -> str:
        """Human-readable error category."""
        return "schema" if self.value >= 2030 else "validation"


@dataclass(frozen=True, slots=True)
class AppError:
    """Error value with a typed code, message and structured metadata."""
    code: ErrorCode
    message: str
    origin: str = ""
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_origin(self, origin: str) -> AppError:
        return AppError(code=self.code, message=self.message, origin=origin,
            metadata=self.metadata, cause=self.cause)

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "origin": self.origin,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        """Transform the success value."""
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]:
        """Chain operations that may fail."""
        return f(self.value)

    def match(self, ok: Callable[[T], U], err: Callable[[AppError], U]) -> U:
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


Result = Union[Ok[T], Err[E]]


class SchemaDefinitionError(TypeError):
    """Raised when a schema entry cannot be turned into a validator.

    This is a programming error in the schema declaration, never a property
    of the value being validated.
    """

    def __init__(self, key: str, entry: object):
        self.key, self.entry = key, entry
        super().__init__(
            f"Schema entry {key!r} must be a validator, a nested mapping or a "
            f"one-element list, got {type(entry).__name__}"
        )

    def to_app_error(self) -> AppError:
        return AppError(code=ErrorCode.E2030_INVALID_SCHEMA, message=str(self),
            metadata={"key": self.key}, cause=self)
