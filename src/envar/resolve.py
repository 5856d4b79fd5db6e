"""Resolution of environment variables against declarative specs."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional, TypeVar, Union, overload

from envar.errors import EnvarError, MissingRequiredVariableError
from envar.spec import VariableSpec, coerce_spec

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_ENVIRONMENT = "environment"
SOURCE_DEFAULT = "default"
SOURCE_UNSET = "unset"


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def _apply_parser(spec: VariableSpec[Any], raw: Optional[str]) -> Any:
    try:
        return spec.parser(raw)
    except EnvarError as exc:
        if exc.name is None:
            exc.name = spec.name
        logger.debug("Parser rejected environment variable %s (%s)", spec.name, exc.code.value)
        raise


def _resolve_spec(spec: VariableSpec[Any], env: Mapping[str, str]) -> Any:
    raw = env.get(spec.name)

    source = SOURCE_ENVIRONMENT
    if raw is None and spec.has_default:
        # An unset variable with a default never reaches the parser.
        value: Any = spec.default
        source = SOURCE_DEFAULT
    else:
        value = raw if spec.parser is None else _apply_parser(spec, raw)
        # Only None counts as absent: NaN from a present but unparseable value is kept.
        if value is None and spec.has_default:
            value = spec.default
            source = SOURCE_DEFAULT

    if value is None:
        if spec.required:
            logger.debug("Required environment variable %s is not set", spec.name)
            raise MissingRequiredVariableError(spec.name)
        source = SOURCE_UNSET

    logger.debug("Resolved environment variable %s from %s", spec.name, source)
    return value


@overload
def resolve(target: VariableSpec[T], env: Optional[Mapping[str, str]] = None) -> Optional[T]: ...


@overload
def resolve(target: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]: ...


@overload
def resolve(target: Any, env: Optional[Mapping[str, str]] = None) -> Any: ...


def resolve(target: Any, env: Optional[Mapping[str, str]] = None) -> Any:
    """Resolve a single environment variable.

    Args:
        target: A bare name, ``(name,)``, ``(name, options)`` where options is a
            mapping with ``parser``/``default``/``required`` keys, or a VariableSpec.
        env: Environment mapping; defaults to ``os.environ`` at call time.

    Returns:
        The parsed value, the default when the parsed value is None, or None.

    Raises:
        MissingRequiredVariableError: If a required variable resolves to None.
        InvalidJSONError: If a JSON parser rejects the raw value.
        InvalidEnumValueError: If an enum parser rejects the raw value.
    """
    return _resolve_spec(coerce_spec(target), _environment(env))


def envar(
    specs: Union[Iterable[Any], Mapping[str, Any]],
    env: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Resolve several environment variables into a name-keyed dict.

    Entries are resolved in input order and the first failure propagates;
    no partial result is returned. A mapping of name to options is accepted
    as a shorthand for its ``items()``.

    Args:
        specs: Ordered ``(name, options)`` pairs or VariableSpec instances.
        env: Environment mapping; defaults to ``os.environ`` at call time.

    Returns:
        Dict from each variable name to its resolved value, in input order.
    """
    if isinstance(specs, str):
        raise TypeError("envar expects a sequence of specs, not a single name; use resolve().")
    if isinstance(specs, Mapping):
        specs = specs.items()
    environment = _environment(env)

    resolved: Dict[str, Any] = {}
    for entry in specs:
        spec = coerce_spec(entry)
        resolved[spec.name] = _resolve_spec(spec, environment)
    return resolved
