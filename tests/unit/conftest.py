"""Unit test environment helpers."""

import pytest

SAMPLE_VARIABLES = (
    "TEST_PORT",
    "TEST_HOST",
    "TEST_DEBUG",
    "TEST_MISSING",
    "TEST_SETTINGS",
    "TEST_MODE",
    "TEST_INT",
    "TEST_FLOAT",
    "TEST_BOOL",
    "TEST_JSON",
    "TEST_STRING",
    "TEST_ENUM",
    "REQUIRED_VAR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop sample variables that a developer shell might already export."""
    for key in SAMPLE_VARIABLES:
        monkeypatch.delenv(key, raising=False)
    yield
