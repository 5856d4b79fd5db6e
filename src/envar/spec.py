"""Variable specifications and coercion of caller-supplied spec shapes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

OPTION_KEYS = frozenset({"parser", "default", "required"})


class _MissingType(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _MissingType.MISSING
"""Marks a spec without a default, so ``default=None`` stays expressible."""


@dataclass(frozen=True)
class VariableSpec(Generic[T]):
    """Declarative description of one environment variable."""

    name: str
    parser: Optional[Callable[[Optional[str]], T]] = None
    default: Union[T, _MissingType] = MISSING
    required: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(
                f"Environment variable name must be a non-empty string, got {self.name!r}."
            )
        if self.parser is not None and not callable(self.parser):
            raise TypeError(f"Parser for '{self.name}' must be callable.")

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @classmethod
    def from_options(
        cls, name: str, options: Optional[Mapping[str, Any]] = None
    ) -> "VariableSpec[Any]":
        """Build a spec from a ``{"parser", "default", "required"}`` mapping."""
        if options is None:
            return cls(name=name)
        if not isinstance(options, Mapping):
            raise TypeError(
                f"Options for '{name}' must be a mapping or VariableSpec, "
                f"got {type(options).__name__}."
            )
        unknown = set(options) - OPTION_KEYS
        if unknown:
            raise TypeError(f"Unknown options for '{name}': {sorted(unknown)}.")
        return cls(
            name=name,
            parser=options.get("parser"),
            default=options.get("default", MISSING),
            required=bool(options.get("required", False)),
        )


def coerce_spec(target: Any) -> VariableSpec[Any]:
    """Normalize a bare name, ``(name,)``, ``(name, options)`` or spec into a VariableSpec.

    Raises:
        TypeError: If the target has none of the accepted shapes.
        ValueError: If the name is empty.
    """
    if isinstance(target, VariableSpec):
        return target
    if isinstance(target, str):
        return VariableSpec(name=target)
    if isinstance(target, (tuple, list)):
        if len(target) == 1:
            return VariableSpec(name=target[0])
        if len(target) == 2:
            name, options = target
            if isinstance(options, VariableSpec):
                if options.name == name:
                    return options
                return dataclasses.replace(options, name=name)
            return VariableSpec.from_options(name, options)
        raise TypeError(
            f"Expected (name,) or (name, options), got a sequence of length {len(target)}."
        )
    raise TypeError(f"Cannot build a variable spec from {type(target).__name__}.")
