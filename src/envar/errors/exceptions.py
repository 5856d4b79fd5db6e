"""Exceptions raised while resolving environment variables."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from envar.errors.error_codes import ErrorCode


class EnvarError(Exception):
    """Base class for resolution failures.

    ``name`` is the environment variable being resolved when the failure
    happened. Parsers used standalone do not know it, so it stays ``None``
    until a resolver records it.
    """

    code: ErrorCode

    def __init__(self, message: str, *, name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return self.message


class MissingRequiredVariableError(EnvarError, LookupError):
    """A required variable resolved to nothing after parsing and defaulting."""

    code = ErrorCode.MISSING_REQUIRED

    def __init__(self, name: str):
        super().__init__(f"Missing required environment variable: {name}", name=name)


class InvalidJSONError(EnvarError, ValueError):
    """The raw value is not valid JSON text."""

    code = ErrorCode.INVALID_JSON

    def __init__(self, reason: Optional[str] = None, *, name: Optional[str] = None):
        message = "Invalid JSON value"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, name=name)
        self.reason = reason


class InvalidEnumValueError(EnvarError, ValueError):
    """The raw value is not one of the allowed choices."""

    code = ErrorCode.INVALID_ENUM

    def __init__(self, allowed: Sequence[Any], *, name: Optional[str] = None):
        self.allowed = tuple(allowed)
        choices = ", ".join(str(choice) for choice in self.allowed)
        super().__init__(f"Expected one of: {choices}", name=name)
