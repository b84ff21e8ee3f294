"""Standalone ordered cursor over a ConfigNode."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from confnode.node import ConfigNode
    from confnode.utils.keys import Key, NormalizedKey

__all__ = ["NodeCursor"]


class NodeCursor:
    """Explicit cursor over the entries of a node, in insertion order.

    The cursor walks a snapshot of the node's key order taken on creation
    and on every reset(). Entries removed from the node while the cursor
    is in use are skipped; entries added are only seen after reset().
    Once the cursor is at the end, key() and value() return None.
    """

    def __init__(self, node: ConfigNode) -> None:
        self._node = node
        self._order: list[NormalizedKey] = []
        self._position = 0
        self.reset()

    def reset(self) -> None:
        """Move back to the first entry."""
        self._order = self._node._key_order()
        self._position = 0
        self._skip_removed()

    def advance(self) -> None:
        """Move to the next entry. A no-op once at the end."""
        if self._position < len(self._order):
            self._position += 1
        self._skip_removed()

    def at_end(self) -> bool:
        self._skip_removed()
        return self._position >= len(self._order)

    def key(self) -> Key | None:
        entry = self._current()
        return None if entry is None else entry.key

    def value(self) -> Any:
        entry = self._current()
        return None if entry is None else entry.value

    def _current(self) -> Any:
        self._skip_removed()
        if self._position >= len(self._order):
            return None
        return self._node._entry(self._order[self._position])

    def _skip_removed(self) -> None:
        while (
            self._position < len(self._order)
            and self._node._entry(self._order[self._position]) is None
        ):
            self._position += 1
