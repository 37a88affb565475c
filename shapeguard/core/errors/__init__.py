"""Error Handling

- Result[T, E]: Ok/Err container for success/failure
- AppError: error value with typed code and metadata
- ErrorCode: validation and schema-definition code taxonomy
- SchemaDefinitionError: raised for malformed schema declarations

Usage:
    from shapeguard.core.errors import Ok, Err

    match parse(payload, is_user, identifier="user"):
        case Ok(user):
            save(user)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    SchemaDefinitionError,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "SchemaDefinitionError",
]
