"""confnode - Recursive, ordered configuration container."""

from __future__ import annotations

# Core
from confnode.node import ConfigNode, Value, wrap_value
from confnode.cursor import NodeCursor
from confnode.options import NodeOptions

# Keys
from confnode.utils.keys import normalize_key, validate_key

# Accessors
from confnode.accessors import (
    Accessor,
    accessor_method,
    call_accessor,
    node_of,
    resolve_accessor,
)

# Errors
from confnode.errors import (
    ConfigError,
    ErrorCodes,
    InvalidKeyTypeError,
    InvalidValueTypeError,
    OverrideError,
    ReadOnlyError,
    UnresolvableAccessorError,
)

__version__ = "0.1.0"

__all__ = [
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
]
