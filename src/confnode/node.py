"""ConfigNode: a recursive, ordered configuration container.

A node maps normalized keys to scalar values or child nodes. Nested plain
data (mappings, lists, tuples) is wrapped into child nodes at insertion
time and can be flattened back with ``to_dict()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Union

from confnode.cursor import NodeCursor
from confnode.errors import InvalidValueTypeError, OverrideError, ReadOnlyError
from confnode.options import NodeOptions
from confnode.utils.keys import Key, NormalizedKey, normalize_key, validate_key

__all__ = ["ConfigNode", "Value", "wrap_value"]

_logger = logging.getLogger(__name__)

Value = Union[None, bool, int, float, str, "ConfigNode"]

_SCALAR_TYPES = (bool, int, float, str)


@dataclass
class _Entry:
    """A stored key/value pair. ``key`` is the key as first inserted."""

    key: Key
    value: Value


def _plain_items(data: Any) -> Iterable[tuple[Key | None, Any]]:
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, (list, tuple)):
        return ((None, item) for item in data)
    raise InvalidValueTypeError(data)


def wrap_value(value: Any, read_only: bool, allow_override: bool) -> Value:
    """Convert plain data into a storable value.

    Scalars and None are returned unchanged. Mappings, lists and tuples
    become a new ConfigNode carrying the given flags. A ConfigNode is
    copied through its flattened form so that children are never shared.

    Args:
        value: The value to convert.
        read_only: read_only flag for a created child node.
        allow_override: allow_override flag for a created child node.

    Returns:
        The value to store.

    Raises:
        InvalidValueTypeError: If value is of an unsupported type.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, ConfigNode):
        value = value.to_dict()
    return ConfigNode(value, read_only=read_only, allow_override=allow_override)


class ConfigNode:
    """Ordered key-value container with normalized keys.

    Keys are str or int. String keys are looked up through their
    normalized form (alphanumerics only, lower-cased), while the key used
    on first insertion is kept for iteration and export.

    Thread safety:
        Not synchronized. Callers sharing a node tree between threads must
        serialize access to it.
    """

    def __init__(
        self,
        data: Mapping[Any, Any] | list[Any] | tuple[Any, ...] | None = None,
        read_only: bool = True,
        allow_override: bool = False,
    ) -> None:
        """Build a node from nested plain data.

        The entries of ``data`` are inserted before ``read_only`` takes
        effect, so read-only nodes can still be built from data. Child
        nodes receive the same flags.

        Args:
            data: A mapping, or a list/tuple whose items get appended.
            read_only: Reject every later set/remove.
            allow_override: Let set replace the value of an existing key.

        Raises:
            InvalidKeyTypeError: If a key in data is not str or int.
            InvalidValueTypeError: If data or a nested value is unsupported.
            OverrideError: If two keys normalize identically and
                allow_override is False.
        """
        self._entries: dict[NormalizedKey, _Entry] = {}
        self._next_index = 0
        self._read_only = bool(read_only)
        self._allow_override = bool(allow_override)
        if data is not None:
            for key, value in _plain_items(data):
                validate_key(key, allow_none=True)
                self._store(key, value)

    @classmethod
    def from_options(
        cls,
        data: Mapping[Any, Any] | list[Any] | tuple[Any, ...] | None = None,
        options: NodeOptions | None = None,
    ) -> ConfigNode:
        """Build a node whose flags come from a NodeOptions model."""
        options = options or NodeOptions()
        return cls(data, read_only=options.read_only, allow_override=options.allow_override)

    # === Flags ===

    @property
    def read_only(self) -> bool:
        """Whether set and remove are rejected."""
        return self._read_only

    @read_only.setter
    def read_only(self, value: bool) -> None:
        self._read_only = bool(value)

    @property
    def allow_override(self) -> bool:
        """Whether set may replace the value of an existing key."""
        return self._allow_override

    @allow_override.setter
    def allow_override(self, value: bool) -> None:
        self._allow_override = bool(value)

    def set_read_only(self, read_only: bool) -> ConfigNode:
        """Set the read_only flag and return this node."""
        self.read_only = read_only
        return self

    def set_allow_override(self, allow_override: bool) -> ConfigNode:
        """Set the allow_override flag and return this node."""
        self.allow_override = allow_override
        return self

    @property
    def options(self) -> NodeOptions:
        """Snapshot of the current flags."""
        return NodeOptions(read_only=self._read_only, allow_override=self._allow_override)

    # === Core operations ===

    def has(self, key: Key) -> bool:
        """Check whether a key exists.

        Raises:
            InvalidKeyTypeError: If key is not str or int.
        """
        validate_key(key)
        return normalize_key(key) in self._entries

    def get(self, key: Key, default: Any = None) -> Any:
        """Return the value stored under key, or default when absent.

        Args:
            key: The key to look up. Any spelling with the same normalized
                form finds the same entry.
            default: Returned as-is when the key is missing.

        Raises:
            InvalidKeyTypeError: If key is not str or int.
        """
        validate_key(key)
        entry = self._entries.get(normalize_key(key))
        if entry is None:
            return default
        return entry.value

    def set(self, key: Key | None, value: Any) -> ConfigNode:
        """Store a value under key.

        A None key appends the value under the next free integer index.
        Mappings, lists and tuples are wrapped into a child node with this
        node's current flags.

        Args:
            key: str, int, or None to append.
            value: A scalar, None, nested plain data or a ConfigNode.

        Returns:
            This node, for chaining.

        Raises:
            InvalidKeyTypeError: If key is not str, int or None.
            ReadOnlyError: If the node is read-only.
            OverrideError: If the key exists and overrides are not allowed.
            InvalidValueTypeError: If value is of an unsupported type.
        """
        validate_key(key, allow_none=True)
        if self._read_only:
            raise ReadOnlyError()
        self._store(key, value)
        return self

    def remove(self, key: Key) -> ConfigNode:
        """Delete the entry for key if present.

        Raises:
            InvalidKeyTypeError: If key is not str or int.
            ReadOnlyError: If the node is read-only.
        """
        validate_key(key)
        if self._read_only:
            raise ReadOnlyError()
        entry = self._entries.pop(normalize_key(key), None)
        if entry is not None:
            _logger.debug("Removed config key %r", entry.key)
        return self

    def merge(self, other: ConfigNode) -> ConfigNode:
        """Set every top-level entry of other on this node.

        Integer keys of other are appended under fresh indices instead of
        colliding with this node's integer keys. String keys follow the
        usual override rules. Not atomic: entries applied before an error
        stay applied.

        Args:
            other: The node to merge in.

        Returns:
            This node, for chaining.

        Raises:
            TypeError: If other is not a ConfigNode.
            ReadOnlyError: If this node is read-only.
            OverrideError: If a string key exists and overrides are not allowed.
        """
        if not isinstance(other, ConfigNode):
            raise TypeError(f"Can only merge a ConfigNode, got {type(other).__name__}")

        items = other.to_dict()
        _logger.debug("Merging %d entries into config node", len(items))
        for key, value in items.items():
            self.set(None if isinstance(key, int) else key, value)
        return self

    def to_dict(self) -> dict[Key, Any]:
        """Flatten this node into nested plain dicts keyed by original keys."""
        result: dict[Key, Any] = {}
        for entry in self._entries.values():
            if isinstance(entry.value, ConfigNode):
                result[entry.key] = entry.value.to_dict()
            else:
                result[entry.key] = entry.value
        return result

    flatten = to_dict

    # === Iteration ===

    def keys(self) -> Iterator[Key]:
        for entry in list(self._entries.values()):
            yield entry.key

    def values(self) -> Iterator[Value]:
        for entry in list(self._entries.values()):
            yield entry.value

    def items(self) -> Iterator[tuple[Key, Value]]:
        """Yield (original key, value) pairs in insertion order.

        Iterates over a snapshot taken when iteration starts, so mutating
        the node meanwhile is safe.
        """
        for entry in list(self._entries.values()):
            yield entry.key, entry.value

    def cursor(self) -> NodeCursor:
        """Return a standalone cursor positioned on the first entry."""
        return NodeCursor(self)

    # === Mapping sugar ===

    def __contains__(self, key: Key) -> bool:
        return self.has(key)

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key | None, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[Key]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ConfigNode({self.to_dict()!r}, read_only={self._read_only}, "
            f"allow_override={self._allow_override})"
        )

    # === Internals ===

    def _store(self, key: Key | None, value: Any) -> None:
        """Insert or override an entry, bypassing the read-only guard."""
        if key is None:
            key = normalized = self._next_index
        else:
            normalized = normalize_key(key)
            entry = self._entries.get(normalized)
            if entry is not None:
                if not self._allow_override:
                    raise OverrideError(key)
                entry.value = wrap_value(value, self._read_only, self._allow_override)
                _logger.debug("Overrode config key %r", entry.key)
                return

        wrapped = wrap_value(value, self._read_only, self._allow_override)
        if isinstance(normalized, int):
            self._next_index = max(self._next_index, normalized + 1)
        self._entries[normalized] = _Entry(key=key, value=wrapped)

    def _key_order(self) -> list[NormalizedKey]:
        return list(self._entries)

    def _entry(self, normalized: NormalizedKey) -> _Entry | None:
        return self._entries.get(normalized)
