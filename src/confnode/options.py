"""Construction options for config nodes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["NodeOptions"]


class NodeOptions(BaseModel):
    """Mutation flags applied to a node and to every child it wraps.

    Attributes:
        read_only: Reject every set/remove once the node is built.
        allow_override: Let set replace the value of an existing key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    read_only: bool = True
    allow_override: bool = False
