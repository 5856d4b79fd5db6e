"""Typed environment variable resolution."""

from envar.errors import (
    EnvarError,
    ErrorCode,
    InvalidEnumValueError,
    InvalidJSONError,
    MissingRequiredVariableError,
    error_code_group,
)
from envar.parsers import (
    parse_env_boolean,
    parse_env_enum,
    parse_env_float,
    parse_env_int,
    parse_env_json,
    parse_env_list,
    parse_env_string,
)
from envar.resolve import envar, resolve
from envar.spec import MISSING, VariableSpec

__all__ = [
    # resolution
    "envar",
    "resolve",
    "VariableSpec",
    "MISSING",
    # parsers
    "parse_env_boolean",
    "parse_env_enum",
    "parse_env_float",
    "parse_env_int",
    "parse_env_json",
    "parse_env_list",
    "parse_env_string",
    # errors
    "EnvarError",
    "ErrorCode",
    "InvalidEnumValueError",
    "InvalidJSONError",
    "MissingRequiredVariableError",
    "error_code_group",
]
