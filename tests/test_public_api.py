"""Tests for the confnode public API surface.

Verifies that all expected names are importable from the top-level
``confnode`` package and that ``__all__`` is comprehensive.
"""

import re

import confnode


class TestPublicAPIImports:
    """Every public component must be importable from ``import confnode``."""

    # -- Core --

    def test_config_node_importable(self):
        from confnode import ConfigNode

        assert ConfigNode is not None

    def test_node_cursor_importable(self):
        from confnode import NodeCursor

        assert NodeCursor is not None

    def test_node_options_importable(self):
        from confnode import NodeOptions

        assert NodeOptions is not None

    # -- Accessors --

    def test_accessor_importable(self):
        from confnode import Accessor, accessor_method, call_accessor, node_of, resolve_accessor

        assert Accessor is not None
        for helper in (accessor_method, call_accessor, node_of, resolve_accessor):
            assert callable(helper)

    # -- Errors --

    def test_errors_share_base(self):
        from confnode import (
            ConfigError,
            InvalidKeyTypeError,
            InvalidValueTypeError,
            OverrideError,
            ReadOnlyError,
            UnresolvableAccessorError,
        )

        for error_cls in (
            InvalidKeyTypeError,
            InvalidValueTypeError,
            OverrideError,
            ReadOnlyError,
            UnresolvableAccessorError,
        ):
            assert issubclass(error_cls, ConfigError)

    def test_version_is_set(self):
        assert re.match(r"^\d+\.\d+\.\d+", confnode.__version__)


class TestPublicAPIAll:
    """``__all__`` lists exactly the public names."""

    EXPECTED_NAMES = {
        # Core
        "ConfigNode",
        "NodeCursor",
        "NodeOptions",
        "Value",
        "wrap_value",
        # Keys
        "normalize_key",
        "validate_key",
        # Accessors
        "Accessor",
        "accessor_method",
        "call_accessor",
        "node_of",
        "resolve_accessor",
        # Errors
        "ConfigError",
        "ErrorCodes",
        "InvalidKeyTypeError",
        "InvalidValueTypeError",
        "OverrideError",
        "ReadOnlyError",
        "UnresolvableAccessorError",
    }

    def test_all_contains_all_expected_names(self):
        actual = set(confnode.__all__)
        missing = self.EXPECTED_NAMES - actual
        assert not missing, f"Missing from __all__: {missing}"

    def test_all_has_no_unexpected_extras(self):
        actual = set(confnode.__all__)
        extra = actual - self.EXPECTED_NAMES
        assert not extra, f"Unexpected names in __all__: {extra}"

    def test_all_names_are_importable(self):
        _MISSING = object()
        for name in confnode.__all__:
            obj = getattr(confnode, name, _MISSING)
            assert (
                obj is not _MISSING
            ), f"Name '{name}' listed in __all__ but not found on module"
