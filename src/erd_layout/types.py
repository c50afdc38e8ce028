"""Shared type definitions for erd-layout.

Small dataclasses used across the index, layout phases and the document codec.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Position:
    """A point in canvas pixel coordinates."""

    x: float
    y: float


@dataclass
class Node:
    """A diagram node.

    ``position`` is only a hint on input; the layout replaces it. ``data`` and
    ``type`` are carried through untouched.
    """

    id: str
    label: str | None = None
    position: Position | None = None
    data: dict[str, Any] = field(default_factory=dict)
    type: str | None = None

    def sort_name(self) -> str:
        """Case-insensitive name used for deterministic tie-breaks."""
        return (self.label if self.label is not None else self.id).lower()

    def hint_x(self) -> float:
        return self.position.x if self.position is not None else 0.0

    def moved_to(self, x: float, y: float) -> Node:
        """Return a copy of this node at (x, y)."""
        return replace(self, position=Position(x=x, y=y), data=dict(self.data))


@dataclass
class Edge:
    """A directed relationship between two node ids."""

    source: str | None
    target: str | None
    id: str | None = None
    label: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
