"""Error taxonomy for environment resolution."""

from envar.errors.error_codes import ErrorCode, error_code_group
from envar.errors.exceptions import (
    EnvarError,
    InvalidEnumValueError,
    InvalidJSONError,
    MissingRequiredVariableError,
)

__all__ = [
    "ErrorCode",
    "error_code_group",
    "EnvarError",
    "InvalidEnumValueError",
    "InvalidJSONError",
    "MissingRequiredVariableError",
]
