"""Layout pipeline and public API."""

from __future__ import annotations

from erd_layout.layout.coordinates import assign_coordinates
from erd_layout.layout.engine import LayoutEngine, layout
from erd_layout.layout.leveling import LevelAssignment, assign_levels
from erd_layout.layout.ordering import UNCONNECTED_OFFSET, count_crossings, initial_order, minimise_crossings
from erd_layout.layout.types import LayoutResult

__all__ = [
    "UNCONNECTED_OFFSET",
    "LayoutEngine",
    "LayoutResult",
    "LevelAssignment",
    "assign_coordinates",
    "assign_levels",
    "count_crossings",
    "initial_order",
    "layout",
    "minimise_crossings",
]
