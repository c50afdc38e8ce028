"""Level assignment — longest-path Kahn leveling with a cycle fallback."""

from __future__ import annotations

import logging
from collections import deque

from erd_layout.ir.graph import GraphIndex

logger = logging.getLogger(__name__)


class LevelAssignment:
    def __init__(self, levels: dict[str, int], level_count: int, fallback_seed: str | None = None) -> None:
        self.levels = levels
        self.level_count = level_count
        self.fallback_seed = fallback_seed

    def buckets(self, index: GraphIndex) -> list[list[str]]:
        """Group node ids by level, keeping input order inside each level."""
        result: list[list[str]] = [[] for _ in range(self.level_count)]
        for node_id in index.node_ids:
            result[self.levels[node_id]].append(node_id)
        return result

    @classmethod
    def assign(cls, index: GraphIndex) -> LevelAssignment:
        """Give every node a level.

        Nodes with no valid incoming edge start at level 0 and each child is
        pushed to ``max(parent level) + 1``. When every node sits on a cycle the
        first input node seeds the walk at level 0; the back edge that closes the
        cycle re-levels and re-queues the seed, after which the remaining
        counters go negative and the walk stops. Nodes the walk never reaches
        take ``1 + max`` over their already-leveled parents, or 0.
        """
        remaining: dict[str, int] = dict(index.in_degree)
        levels: dict[str, int] = {}
        queue: deque[str] = deque()

        for node_id in index.node_ids:
            if remaining[node_id] == 0:
                levels[node_id] = 0
                queue.append(node_id)

        seed: str | None = None
        if not queue and index.node_ids:
            seed = index.node_ids[0]
            levels[seed] = 0
            queue.append(seed)
            logger.debug(
                "no root node found; seeding leveling with %r (%d node(s) on cycles)",
                seed,
                len(index.cyclic_nodes()),
            )

        while queue:
            node_id = queue.popleft()
            child_level = levels[node_id] + 1
            for child in index.outgoing[node_id]:
                if levels.get(child, 0) < child_level:
                    levels[child] = child_level
                remaining[child] -= 1
                if remaining[child] == 0:
                    queue.append(child)

        unresolved = 0
        for node_id in index.node_ids:
            if node_id in levels:
                continue
            unresolved += 1
            parent_levels = [levels[p] for p in index.incoming[node_id] if p in levels]
            levels[node_id] = max(parent_levels) + 1 if parent_levels else 0

        if unresolved:
            logger.debug("levelled %d node(s) on unresolved cycles by fallback", unresolved)

        level_count = (max(levels.values()) + 1) if levels else 0
        return cls(levels=levels, level_count=level_count, fallback_seed=seed)


def assign_levels(index: GraphIndex) -> LevelAssignment:
    return LevelAssignment.assign(index)
