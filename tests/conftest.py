"""Shared fixtures for the confnode test suite."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def sample_data() -> dict[Any, Any]:
    """Nested plain data mixing string and integer keys."""
    return {
        "string_value": "foo",
        "int_value": 123,
        "bool_value": True,
        "null_value": None,
        "array_value": {"foo": "bar"},
        0: True,
        666: {"baz": "woo", "fiz": {0: "hug", "hug": True}},
    }
