"""Graph index — validates raw nodes/edges and builds adjacency for layout.

The index is built fresh for every layout call and never shared. Edges that
reference unknown node ids, and self-loops, are dropped here so that no
downstream phase has to care about them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import networkx as nx

from erd_layout.types import Edge, Node

logger = logging.getLogger(__name__)


class GraphIndex:
    """Adjacency lists and in-degree counts keyed by node id.

    Wraps a networkx ``MultiDiGraph`` of the valid edges (parallel edges kept)
    for topology queries. ``outgoing``/``incoming`` keep edge input order and
    ``node_ids`` keeps node input order, which later phases use as the
    cycle-fallback seed and as the initial in-level order.
    """

    def __init__(
        self,
        digraph: nx.MultiDiGraph,
        nodes: dict[str, Node],
        node_ids: list[str],
        outgoing: dict[str, list[str]],
        incoming: dict[str, list[str]],
        skipped_edges: int = 0,
    ) -> None:
        self.digraph = digraph
        self.nodes = nodes
        self.node_ids = node_ids
        self.outgoing = outgoing
        self.incoming = incoming
        self.in_degree: dict[str, int] = {nid: digraph.in_degree(nid) for nid in node_ids}
        self.skipped_edges = skipped_edges

    @classmethod
    def build(cls, nodes: Sequence[Node], edges: Sequence[Edge]) -> GraphIndex:
        """Index ``nodes`` and every valid edge in ``edges``."""
        by_id: dict[str, Node] = {n.id: n for n in nodes}
        node_ids = [n.id for n in nodes]

        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        digraph.add_nodes_from(node_ids)
        outgoing: dict[str, list[str]] = {nid: [] for nid in node_ids}
        incoming: dict[str, list[str]] = {nid: [] for nid in node_ids}

        skipped = 0
        for edge in edges:
            if edge.source not in by_id or edge.target not in by_id or edge.source == edge.target:
                skipped += 1
                continue
            digraph.add_edge(edge.source, edge.target)
            outgoing[edge.source].append(edge.target)
            incoming[edge.target].append(edge.source)

        if skipped:
            logger.debug("skipped %d dangling or self-referencing edge(s)", skipped)

        return cls(
            digraph=digraph,
            nodes=by_id,
            node_ids=node_ids,
            outgoing=outgoing,
            incoming=incoming,
            skipped_edges=skipped,
        )

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def label_of(self, node_id: str) -> str:
        return self.nodes[node_id].sort_name()

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def cyclic_nodes(self) -> set[str]:
        """Node ids that lie on at least one directed cycle."""
        if self.is_dag():
            return set()
        result: set[str] = set()
        for component in nx.strongly_connected_components(self.digraph):
            if len(component) > 1:
                result.update(component)
        return result
