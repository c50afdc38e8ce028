"""Diagram document codec — the editor's JSON node/edge format.

A document looks like::

    {"nodes": [{"id": "user", "type": "entity", "position": {"x": 0, "y": 0},
                "data": {"name": "User", "fields": [...]}}],
     "edges": [{"id": "e1", "source": "user", "target": "order", "label": "1:N"}]}

Only ``id``, ``position`` and the ``name``/``label`` inside ``data`` are read;
every other key is carried through to the output untouched.
"""

from __future__ import annotations

import copy
from typing import Any

from erd_layout.config import LayoutConfig
from erd_layout.layout.engine import LayoutEngine
from erd_layout.layout.types import LayoutResult
from erd_layout.types import Edge, Node, Position

DEFAULT_MAX_NODES: int = 5000


class DiagramError(ValueError):
    """A diagram document is structurally malformed."""


class DiagramTooLarge(DiagramError):
    """A diagram has more nodes than the caller allows."""


def _require_list(doc: Any, key: str, required: bool) -> list[Any]:
    if not isinstance(doc, dict):
        raise DiagramError("diagram document must be a JSON object")
    value = doc.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        raise DiagramError(f"'{key}' must be a list")
    return value


def _node_label(data: dict[str, Any]) -> str | None:
    for key in ("name", "label"):
        value = data.get(key)
        if isinstance(value, str):
            return value
    return None


def _position(raw: Any, node_id: str) -> Position | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DiagramError(f"node '{node_id}': position must be an object")
    try:
        return Position(x=float(raw.get("x", 0)), y=float(raw.get("y", 0)))
    except (TypeError, ValueError) as e:
        raise DiagramError(f"node '{node_id}': position is not numeric") from e


def nodes_from_json(raw_nodes: list[Any]) -> list[Node]:
    """Decode a list of JSON node objects."""
    nodes: list[Node] = []
    for i, raw in enumerate(raw_nodes):
        if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
            raise DiagramError(f"node #{i} has no string 'id'")
        data = raw.get("data")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DiagramError(f"node '{raw['id']}': data must be an object")
        nodes.append(
            Node(
                id=raw["id"],
                label=_node_label(data),
                position=_position(raw.get("position"), raw["id"]),
                data=data,
                type=raw.get("type"),
            )
        )
    return nodes


def _endpoint(value: Any) -> str | None:
    # Non-string endpoints can never match a node id; the index drops them as dangling.
    return value if isinstance(value, str) else None


def edges_from_json(raw_edges: list[Any]) -> list[Edge]:
    """Decode a list of JSON edge objects."""
    edges: list[Edge] = []
    for i, raw in enumerate(raw_edges):
        if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
            raise DiagramError(f"edge #{i} needs 'source' and 'target'")
        label = raw.get("label")
        edges.append(
            Edge(
                source=_endpoint(raw["source"]),
                target=_endpoint(raw["target"]),
                id=raw.get("id"),
                label=label if isinstance(label, str) else None,
                data=raw.get("data") or {},
            )
        )
    return edges


def nodes_to_json(raw_nodes: list[dict[str, Any]], laid_out: list[Node]) -> list[dict[str, Any]]:
    """Copy ``raw_nodes`` with each ``position`` replaced from ``laid_out``."""
    result: list[dict[str, Any]] = []
    for raw, node in zip(raw_nodes, laid_out):
        out = copy.deepcopy(raw)
        out["position"] = {"x": node.position.x, "y": node.position.y}  # type: ignore[union-attr]
        result.append(out)
    return result


def layout_document_result(
    doc: dict[str, Any],
    config: LayoutConfig | None = None,
    max_nodes: int | None = None,
) -> tuple[dict[str, Any], LayoutResult]:
    """Lay out a document and also return the engine's diagnostics."""
    raw_nodes = _require_list(doc, "nodes", required=True)
    raw_edges = _require_list(doc, "edges", required=False)
    if max_nodes is not None and len(raw_nodes) > max_nodes:
        raise DiagramTooLarge(f"diagram has {len(raw_nodes)} nodes; limit is {max_nodes}")

    result = LayoutEngine(config).run(nodes_from_json(raw_nodes), edges_from_json(raw_edges))
    out = copy.deepcopy(doc)
    out["nodes"] = nodes_to_json(raw_nodes, result.nodes)
    return out, result


def layout_document(
    doc: dict[str, Any],
    config: LayoutConfig | None = None,
    max_nodes: int | None = None,
) -> dict[str, Any]:
    """Return a copy of ``doc`` with every node repositioned.

    Raises:
        DiagramError: If the document is malformed.
        DiagramTooLarge: If ``max_nodes`` is set and exceeded.
    """
    out, _ = layout_document_result(doc, config, max_nodes)
    return out


def normalize_patch(patch: dict[str, Any], config: LayoutConfig | None = None) -> dict[str, Any]:
    """Re-layout the ``entities`` diagram of an editor update patch.

    Patches without entity nodes are returned as-is.
    """
    entities = patch.get("entities")
    if not isinstance(entities, dict) or not entities.get("nodes"):
        return patch
    return {**patch, "entities": layout_document(entities, config)}
