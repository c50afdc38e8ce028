"""Layout engine — runs index, leveling, ordering and coordinates in one pass."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from erd_layout.config import DEFAULT_CONFIG, LayoutConfig
from erd_layout.ir.graph import GraphIndex
from erd_layout.layout.coordinates import assign_coordinates
from erd_layout.layout.leveling import LevelAssignment
from erd_layout.layout.ordering import count_crossings, initial_order, minimise_crossings
from erd_layout.layout.types import LayoutResult
from erd_layout.types import Edge, Node

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Layered top-to-bottom layout engine.

    Holds only configuration; every ``run`` builds its own working state, so
    one engine can be shared between callers.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def run(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> LayoutResult:
        if not nodes:
            return LayoutResult(nodes=[])

        index = GraphIndex.build(nodes, edges)
        la = LevelAssignment.assign(index)
        ordering = initial_order(la.buckets(index), index)
        ordering = minimise_crossings(ordering, index, la.levels, self.config.iterations)
        positions = assign_coordinates(ordering, index, la.levels, self.config)

        laid_out = [node.moved_to(positions[node.id].x, positions[node.id].y) for node in nodes]
        crossings = count_crossings(ordering, index, la.levels)
        cyclic = index.cyclic_nodes()
        logger.debug(
            "laid out %d node(s) and %d edge(s) on %d level(s), %d crossing(s), %d node(s) on cycles",
            index.node_count(),
            index.edge_count(),
            la.level_count,
            crossings,
            len(cyclic),
        )
        return LayoutResult(
            nodes=laid_out,
            levels=dict(la.levels),
            ordering=ordering,
            crossings=crossings,
            skipped_edges=index.skipped_edges,
            cyclic_nodes=cyclic,
        )

    def layout(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> list[Node]:
        return self.run(nodes, edges).nodes


def layout(nodes: Sequence[Node], edges: Sequence[Edge], config: LayoutConfig | None = None) -> list[Node]:
    """Return ``nodes`` repositioned into a layered layout.

    Args:
        nodes: Diagram nodes; input order breaks ties and picks the cycle seed.
        edges: Directed edges; dangling edges and self-loops are ignored.
        config: Gap sizes, origin and sweep count; defaults to ``LayoutConfig()``.

    Returns:
        New node objects, same ids and order, with ``position`` replaced.
    """
    return LayoutEngine(config).layout(nodes, edges)
