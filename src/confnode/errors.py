"""Error hierarchy for the confnode package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigError",
    "InvalidKeyTypeError",
    "InvalidValueTypeError",
    "ReadOnlyError",
    "OverrideError",
    "UnresolvableAccessorError",
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all confnode errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidKeyTypeError(ConfigError, TypeError):
    """Raised when a key is not of an accepted type."""

    def __init__(self, key: Any) -> None:
        key_type = type(key).__name__
        super().__init__(
            code="INVALID_KEY_TYPE",
            message=f'Config keys must be of type "str" or "int"; "{key_type}" was given.',
            details={"key_type": key_type},
        )

    @property
    def key_type(self) -> str:
        """Runtime type name of the rejected key."""
        return self.details["key_type"]


class InvalidValueTypeError(ConfigError, TypeError):
    """Raised when a value is neither a scalar nor nested plain data."""

    def __init__(self, value: Any) -> None:
        value_type = type(value).__name__
        super().__init__(
            code="INVALID_VALUE_TYPE",
            message=f'Config values must be scalars, mappings or sequences; "{value_type}" was given.',
            details={"value_type": value_type},
        )

    @property
    def value_type(self) -> str:
        """Runtime type name of the rejected value."""
        return self.details["value_type"]


class ReadOnlyError(ConfigError):
    """Raised on any mutation of a read-only node."""

    def __init__(self) -> None:
        super().__init__(
            code="READ_ONLY",
            message="Config instance is read-only and can't be modified.",
        )


class OverrideError(ConfigError):
    """Raised when setting an existing key on a node that forbids overrides."""

    def __init__(self, key: str | int) -> None:
        super().__init__(
            code="OVERRIDE_NOT_ALLOWED",
            message=f'Config instance does not allow overrides and key "{key}" already exists.',
            details={"key": key},
        )

    @property
    def key(self) -> str | int:
        """The key as passed by the caller, before normalization."""
        return self.details["key"]


class UnresolvableAccessorError(ConfigError, AttributeError):
    """Raised when an accessor name maps to none of get/set/has/remove."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code="UNRESOLVABLE_ACCESSOR",
            message=f'Config can not resolve method "{name}" to any valid method.',
            details={"name": name},
        )

    @property
    def accessor_name(self) -> str:
        """The accessor name that could not be resolved."""
        return self.details["name"]


class ErrorCodes:
    """All confnode error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.READ_ONLY:
            node.read_only = False
    """

    INVALID_KEY_TYPE = "INVALID_KEY_TYPE"
    INVALID_VALUE_TYPE = "INVALID_VALUE_TYPE"
    READ_ONLY = "READ_ONLY"
    OVERRIDE_NOT_ALLOWED = "OVERRIDE_NOT_ALLOWED"
    UNRESOLVABLE_ACCESSOR = "UNRESOLVABLE_ACCESSOR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
