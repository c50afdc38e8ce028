"""erd-layout: layered auto-layout for entity-relationship diagrams."""

from erd_layout.config import LayoutConfig
from erd_layout.document import DiagramError, DiagramTooLarge, layout_document, normalize_patch
from erd_layout.layout import LayoutEngine, LayoutResult, layout
from erd_layout.types import Edge, Node, Position

__all__ = [
    "DiagramError",
    "DiagramTooLarge",
    "Edge",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "Node",
    "Position",
    "layout",
    "layout_document",
    "normalize_patch",
]
