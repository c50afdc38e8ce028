"""Layout result types."""

from __future__ import annotations

from dataclasses import dataclass, field

from erd_layout.types import Node


@dataclass
class LayoutResult:
    """Self-contained layout output — repositioned nodes plus diagnostics."""

    nodes: list[Node]
    levels: dict[str, int] = field(default_factory=dict)
    ordering: list[list[str]] = field(default_factory=list)
    crossings: int = 0
    skipped_edges: int = 0
    cyclic_nodes: set[str] = field(default_factory=set)

    @property
    def level_count(self) -> int:
        return len(self.ordering)
