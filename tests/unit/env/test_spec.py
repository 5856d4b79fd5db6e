"""Tests for variable spec construction and coercion."""

import dataclasses

import pytest

from envar import MISSING, VariableSpec, parse_env_int
from envar.spec import coerce_spec


def test_variable_spec_defaults():
    """A bare spec has no parser, no default and is optional."""
    spec = VariableSpec(name="PORT")

    assert spec.parser is None
    assert spec.default is MISSING
    assert spec.has_default is False
    assert spec.required is False


def test_variable_spec_none_default_is_a_default():
    """default=None is distinguishable from no default."""
    assert VariableSpec(name="PORT", default=None).has_default is True


@pytest.mark.parametrize("name", ["", None, 5])
def test_variable_spec_rejects_invalid_names(name):
    """Names must be non-empty strings."""
    with pytest.raises(ValueError):
        VariableSpec(name=name)


def test_variable_spec_rejects_non_callable_parser():
    """Parsers must be callable."""
    with pytest.raises(TypeError):
        VariableSpec(name="PORT", parser="int")


def test_variable_spec_is_frozen():
    """Specs are immutable once built."""
    spec = VariableSpec(name="PORT")
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.required = True


def test_from_options():
    """Option mappings populate the matching fields."""
    spec = VariableSpec.from_options(
        "PORT", {"parser": parse_env_int, "default": 8080, "required": True}
    )

    assert spec == VariableSpec(name="PORT", parser=parse_env_int, default=8080, required=True)
    assert VariableSpec.from_options("PORT") == VariableSpec(name="PORT")


def test_from_options_rejects_unknown_keys():
    """Typos in option names are reported instead of ignored."""
    with pytest.raises(TypeError, match="defualt"):
        VariableSpec.from_options("PORT", {"defualt": 8080})


def test_from_options_rejects_non_mapping():
    """Options must be a mapping."""
    with pytest.raises(TypeError):
        VariableSpec.from_options("PORT", ["default", 8080])


def test_coerce_spec_shapes():
    """Bare names, 1-tuples, pairs and specs all normalize to VariableSpec."""
    assert coerce_spec("PORT") == VariableSpec(name="PORT")
    assert coerce_spec(("PORT",)) == VariableSpec(name="PORT")
    assert coerce_spec(["PORT", {"default": 1}]) == VariableSpec(name="PORT", default=1)

    spec = VariableSpec(name="PORT", default=1)
    assert coerce_spec(spec) is spec
    assert coerce_spec(("PORT", spec)) is spec
    assert coerce_spec(("OTHER", spec)) == VariableSpec(name="OTHER", default=1)


@pytest.mark.parametrize("target", [(), ("A", {}, True), 42, None])
def test_coerce_spec_rejects_unknown_shapes(target):
    """Anything else is a TypeError."""
    with pytest.raises(TypeError):
        coerce_spec(target)
