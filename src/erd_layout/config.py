"""Centralized configuration for erd-layout."""

from __future__ import annotations

from dataclasses import dataclass, replace

H_GAP: float = 390
V_GAP: float = 320
ORIGIN_X: float = 600
ORIGIN_Y: float = 100
MIN_GAP: float = 350
SWEEP_ITERATIONS: int = 4


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry and iteration budget for the layout pipeline.

    Attributes:
        h_gap: Horizontal distance between evenly spaced nodes in a row.
        v_gap: Vertical distance between consecutive levels.
        origin_x: Column every row is centered on.
        origin_y: y of level 0.
        min_gap: Smallest allowed horizontal distance between two nodes of a row.
        iterations: Number of down+up barycenter sweeps.
    """

    h_gap: float = H_GAP
    v_gap: float = V_GAP
    origin_x: float = ORIGIN_X
    origin_y: float = ORIGIN_Y
    min_gap: float = MIN_GAP
    iterations: int = SWEEP_ITERATIONS

    def replace(self, **changes: float) -> LayoutConfig:
        """Return a copy with the given fields changed; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_CONFIG = LayoutConfig()
