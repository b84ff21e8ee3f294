"""Key validation and normalization for config nodes."""

from __future__ import annotations

import re
from typing import Any, Union

from confnode.errors import InvalidKeyTypeError

__all__ = ["Key", "NormalizedKey", "is_valid_key", "validate_key", "normalize_key"]

Key = Union[str, int]
NormalizedKey = Union[str, int, None]

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def is_valid_key(key: Any, allow_none: bool = False) -> bool:
    """Return True if key is a str or int (or None when allow_none is set).

    bool is rejected even though it subclasses int.
    """
    if key is None:
        return allow_none
    if isinstance(key, bool):
        return False
    return isinstance(key, (str, int))


def validate_key(key: Any, allow_none: bool = False) -> None:
    """Raise InvalidKeyTypeError unless key is an accepted key type.

    Args:
        key: The key to check.
        allow_none: Whether None (append) is accepted.

    Raises:
        InvalidKeyTypeError: If the key type is not accepted.
    """
    if not is_valid_key(key, allow_none=allow_none):
        raise InvalidKeyTypeError(key)


def normalize_key(key: Key | None) -> NormalizedKey:
    """Reduce a key to its canonical lookup form.

    Integers and None pass through. Strings lose every character outside
    [A-Za-z0-9] and are lower-cased, so "snake_case_key", "SnakeCaseKey"
    and " SNAKE - CASE - KEY " all map to "snakecasekey".

    Args:
        key: A validated key.

    Returns:
        The normalized key.
    """
    if key is None or isinstance(key, int):
        return key
    return _NON_ALNUM.sub("", key).lower().strip()
