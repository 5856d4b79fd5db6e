"""Typed parsers for raw environment variable values.

Every parser takes the raw value (``None`` when the variable is unset) and
returns a typed value. Numeric parsers never raise: input without a leading
number yields ``NaN``. JSON and enum parsers raise, since a malformed value
there is a configuration mistake that should surface at startup.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from envar.errors import InvalidEnumValueError, InvalidJSONError

T = TypeVar("T")

# Leading numeric prefix, mirroring lenient base-10 parsing: trailing junk is ignored.
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

_TRUE_LITERAL = "true"


def parse_env_int(value: Optional[str]) -> float:
    """Parse a base-10 integer, returning NaN when no leading digits exist.

    The result is an ``int`` on success; ``NaN`` is a float, hence the
    wider annotation.
    """
    if value is None:
        return math.nan
    match = _INT_PREFIX_RE.match(value)
    if match is None:
        return math.nan
    return int(match.group(1))


def parse_env_float(value: Optional[str]) -> float:
    """Parse a decimal float, returning NaN when no leading number exists."""
    if value is None:
        return math.nan
    match = _FLOAT_PREFIX_RE.match(value)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_env_boolean(value: Optional[str]) -> bool:
    """Return True only for the exact (stripped) literal ``true``."""
    if value is None:
        return False
    return value.strip() == _TRUE_LITERAL


def parse_env_json(value: Optional[str]) -> Any:
    """Parse JSON text.

    Raises:
        InvalidJSONError: when the value is not valid JSON. The raw text is
            left out of the message since it may hold credentials.
    """
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise InvalidJSONError(exc.msg) from exc


def parse_env_string(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace."""
    if value is None:
        return None
    return value.strip()


def parse_env_enum(allowed: Iterable[T]) -> Callable[[Optional[str]], Optional[T]]:
    """Build a parser accepting only the given choices.

    Args:
        allowed: Accepted values. Snapshotted when the parser is built.

    Returns:
        Parser returning the matching choice, or None when the variable is unset.

    Raises:
        ValueError: If ``allowed`` is empty.
    """
    choices = tuple(allowed)
    if not choices:
        raise ValueError("parse_env_enum requires at least one allowed value.")

    def _parse(value: Optional[str]) -> Optional[T]:
        if value is None:
            return None
        candidate = value.strip()
        for choice in choices:
            if candidate == choice:
                return choice
        raise InvalidEnumValueError(choices)

    return _parse


def parse_env_list(separator: str = ",") -> Callable[[Optional[str]], Optional[List[str]]]:
    """Build a parser splitting a value into stripped, non-empty items."""
    if not separator:
        raise ValueError("parse_env_list requires a non-empty separator.")

    def _parse(value: Optional[str]) -> Optional[List[str]]:
        if value is None:
            return None
        return [item.strip() for item in value.split(separator) if item.strip()]

    return _parse
