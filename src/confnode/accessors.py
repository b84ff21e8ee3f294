"""Property-style and named-method access to a ConfigNode.

``Accessor`` wraps a node without becoming part of it:

    acc = Accessor(node)
    acc.string_value                      # node.get("string_value")
    acc.string_value = "bar"              # node.set("string_value", "bar")
    call_accessor(acc, "getStringValue")  # node.get("StringValue")
    call_accessor(acc, "set_port", 8080)  # node.set("_port", 8080)
    call_accessor(acc, "hasDebug")        # node.has("Debug")
    call_accessor(acc, "removeDebug")     # node.remove("Debug")

Since keys are normalized, ``"StringValue"`` and ``"_string_value"``
find the same entry as ``"string_value"``.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from confnode.errors import UnresolvableAccessorError
from confnode.node import ConfigNode
from confnode.utils.keys import normalize_key

__all__ = ["Accessor", "accessor_method", "call_accessor", "node_of", "resolve_accessor"]

_logger = logging.getLogger(__name__)

# "remove" first so it is never read as a shorter prefix.
_PREFIXES = ("remove", "get", "set", "has")


def resolve_accessor(name: str) -> tuple[str, str]:
    """Map an accessor name to an operation and a key.

    Args:
        name: A name such as "getFoo", "set_foo", "hasFoo" or "removeFoo".

    Returns:
        (operation, key) where operation is one of get/set/has/remove and
        key is the remainder of the name after the prefix.

    Raises:
        UnresolvableAccessorError: If no prefix matches or the remainder
            normalizes to an empty key.
    """
    for prefix in _PREFIXES:
        if name.startswith(prefix):
            key = name[len(prefix):]
            if normalize_key(key):
                return prefix, key
            break
    raise UnresolvableAccessorError(name)


# Extra positional arguments each operation takes after the key.
_ARITY = {"get": (0, 1), "set": (1, 1), "has": (0, 0), "remove": (0, 0)}


def node_of(accessor: Accessor) -> ConfigNode:
    """Return the node wrapped by an accessor."""
    return object.__getattribute__(accessor, "_node")


def call_accessor(accessor: Accessor, name: str, *args: Any) -> Any:
    """Resolve name with resolve_accessor() and forward to the wrapped node.

    Args:
        accessor: The accessor to dispatch on.
        name: The accessor name, e.g. "getStringValue".
        *args: Forwarded after the key. set takes exactly one (the value),
            get takes an optional default, has and remove take none.

    Returns:
        The result of get or has, or the accessor after set/remove.

    Raises:
        UnresolvableAccessorError: If name cannot be resolved.
        TypeError: If the number of arguments does not fit the operation.
    """
    operation, key = resolve_accessor(name)
    low, high = _ARITY[operation]
    if not low <= len(args) <= high:
        expected = str(low) if low == high else f"{low} to {high}"
        raise TypeError(
            f"Accessor {name!r} ({operation}) takes {expected} argument(s), got {len(args)}"
        )

    _logger.debug("Accessor %r dispatched to %s(%r)", name, operation, key)
    result = getattr(node_of(accessor), operation)(key, *args)
    if operation in ("set", "remove"):
        return accessor
    return _wrap(result)


def accessor_method(accessor: Accessor, name: str) -> Callable[..., Any]:
    """Return a callable bound to the accessor name."""
    resolve_accessor(name)
    return functools.partial(call_accessor, accessor, name)


class Accessor:
    """Attribute-style view of a ConfigNode.

    Reading an attribute calls get (child nodes come back wrapped in an
    Accessor, missing keys give None), assigning calls set, and del calls
    remove. Names starting with an underscore are never treated as keys.
    The accessor has no public members of its own, so every other name is
    a key; use node_of(), call_accessor() and accessor_method() to reach
    the node and the named operations.
    """

    def __init__(self, node: ConfigNode) -> None:
        object.__setattr__(self, "_node", node)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return _wrap(node_of(self).get(name))

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            raise AttributeError(f"Cannot set private attribute {name!r} on Accessor")
        node_of(self).set(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            raise AttributeError(f"Cannot delete private attribute {name!r} on Accessor")
        node_of(self).remove(name)

    def __repr__(self) -> str:
        return f"Accessor({node_of(self)!r})"


def _wrap(value: Any) -> Any:
    if isinstance(value, ConfigNode):
        return Accessor(value)
    return value
