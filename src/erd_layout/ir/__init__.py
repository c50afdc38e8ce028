"""Intermediate representation: the per-call graph index."""

from erd_layout.ir.graph import GraphIndex

__all__ = [
    "GraphIndex",
]
