"""shapeguard: runtime shape validation for untrusted data.

Usage:
    from shapeguard import is_type, is_string, is_number, ReportingContext

    is_user = is_type({"name": is_string, "age": is_number})
    is_user({"name": 123, "age": 30}, ReportingContext("user", print))
    # Expected user.name (123) to be "string"
"""
from .validation import *  # noqa: F401,F403
from .validation import __all__ as _validation_all
from .core.errors import Ok, Err, Result, AppError, ErrorCode, SchemaDefinitionError
from .core.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    *_validation_all,
    "Ok",
    "Err",
    "Result",
    "AppError",
    "ErrorCode",
    "SchemaDefinitionError",
    "configure_logging",
]
