"""Canonical error-code taxonomy for environment resolution failures."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Bounded error codes attached to every resolution failure."""

    MISSING_REQUIRED = "MISSING_REQUIRED"
    INVALID_JSON = "INVALID_JSON"
    INVALID_ENUM = "INVALID_ENUM"


_CODE_GROUPS: dict[ErrorCode, str] = {
    ErrorCode.MISSING_REQUIRED: "MISSING",
    ErrorCode.INVALID_JSON: "PARSE",
    ErrorCode.INVALID_ENUM: "PARSE",
}


def error_code_group(code: ErrorCode | str) -> str:
    """Return a stable coarse grouping for reporting dimensions."""
    return _CODE_GROUPS[ErrorCode(code)]
