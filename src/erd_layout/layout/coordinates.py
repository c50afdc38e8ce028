"""Coordinate assignment — turn levels and in-level order into pixels."""

from __future__ import annotations

from erd_layout.config import DEFAULT_CONFIG, LayoutConfig
from erd_layout.ir.graph import GraphIndex
from erd_layout.types import Position


def assign_coordinates(
    ordering: list[list[str]],
    index: GraphIndex,
    levels: dict[str, int],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> dict[str, Position]:
    """Assign an (x, y) canvas position to every ordered node.

    Rows are spaced evenly around ``origin_x``, junction nodes (two or more
    parents on the level above) move under their parents' mean x, overlaps
    are pushed apart to ``min_gap``, and each row is re-centered.
    """
    x_by_id: dict[str, float] = {}

    for ids in ordering:
        start_x = config.origin_x - ((len(ids) - 1) * config.h_gap) / 2
        for i, node_id in enumerate(ids):
            x_by_id[node_id] = start_x + i * config.h_gap

    for level in range(1, len(ordering)):
        for node_id in ordering[level]:
            parents = [p for p in index.incoming[node_id] if levels[p] == level - 1]
            if len(parents) < 2:
                continue
            x_by_id[node_id] = sum(x_by_id[p] for p in parents) / len(parents)

    for ids in ordering:
        _resolve_collisions(ids, x_by_id, config.min_gap)
        _center_row(ids, x_by_id, config.origin_x)

    return {
        node_id: Position(x=x_by_id[node_id], y=config.origin_y + levels[node_id] * config.v_gap)
        for ids in ordering
        for node_id in ids
    }


def _resolve_collisions(ids: list[str], x_by_id: dict[str, float], min_gap: float) -> None:
    cursor = float("-inf")
    for node_id in sorted(ids, key=lambda nid: x_by_id[nid]):
        placed = max(x_by_id[node_id], cursor + min_gap)
        x_by_id[node_id] = placed
        cursor = placed


def _center_row(ids: list[str], x_by_id: dict[str, float], origin_x: float) -> None:
    if not ids:
        return
    xs = [x_by_id[nid] for nid in ids]
    shift = origin_x - (min(xs) + max(xs)) / 2
    for node_id in ids:
        x_by_id[node_id] += shift
