"""In-level ordering — barycenter crossing reduction."""

from __future__ import annotations

import logging

from erd_layout.config import SWEEP_ITERATIONS
from erd_layout.ir.graph import GraphIndex

logger = logging.getLogger(__name__)

# Score offset for nodes without neighbours on the adjacent level, so they
# stay near their current slot instead of collapsing to the front.
UNCONNECTED_OFFSET: int = 1000


def initial_order(buckets: list[list[str]], index: GraphIndex) -> list[list[str]]:
    """Sort each level by hint x, then by case-insensitive label."""
    return [
        sorted(ids, key=lambda nid: (index.nodes[nid].hint_x(), index.label_of(nid)))
        for ids in buckets
    ]


def minimise_crossings(
    ordering: list[list[str]],
    index: GraphIndex,
    levels: dict[str, int],
    iterations: int = SWEEP_ITERATIONS,
) -> list[list[str]]:
    """Reorder levels with alternating down/up barycenter sweeps.

    Returns a new ordering; ``ordering`` is left untouched.
    """
    ordering = [list(ids) for ids in ordering]
    max_level = len(ordering) - 1

    for _iter in range(iterations):
        for level in range(1, max_level + 1):
            ordering[level] = _sweep(ordering[level], ordering[level - 1], index.incoming, levels, level - 1, index)

        for level in range(max_level - 1, -1, -1):
            ordering[level] = _sweep(ordering[level], ordering[level + 1], index.outgoing, levels, level + 1, index)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("ordering settled with %d crossing(s)", count_crossings(ordering, index, levels))
    return ordering


def _sweep(
    ids: list[str],
    neighbour_ids: list[str],
    adjacency: dict[str, list[str]],
    levels: dict[str, int],
    neighbour_level: int,
    index: GraphIndex,
) -> list[str]:
    pos: dict[str, int] = {nid: i for i, nid in enumerate(neighbour_ids)}
    scored: list[tuple[float, str, str]] = []
    for i, node_id in enumerate(ids):
        neighbours = [nb for nb in adjacency[node_id] if levels[nb] == neighbour_level]
        if neighbours:
            score = sum(pos[nb] for nb in neighbours) / len(neighbours)
        else:
            score = float(i + UNCONNECTED_OFFSET)
        scored.append((score, index.label_of(node_id), node_id))
    scored.sort(key=lambda s: (s[0], s[1]))
    return [node_id for _, _, node_id in scored]


def count_crossings(ordering: list[list[str]], index: GraphIndex, levels: dict[str, int]) -> int:
    """Count pairwise crossings of edges between adjacent levels."""
    total = 0
    for l_idx in range(len(ordering) - 1):
        tgt_pos: dict[str, int] = {nid: i for i, nid in enumerate(ordering[l_idx + 1])}
        edges: list[tuple[int, int]] = []
        for sp, src_id in enumerate(ordering[l_idx]):
            for nb in index.outgoing[src_id]:
                if nb in tgt_pos and levels[nb] == l_idx + 1:
                    edges.append((sp, tgt_pos[nb]))
        for i in range(len(edges)):
            for j in range(i + 1, len(edges)):
                ei, ej = edges[i], edges[j]
                if (ei[0] < ej[0] and ei[1] > ej[1]) or (ei[0] > ej[0] and ei[1] < ej[1]):
                    total += 1
    return total
