"""Tests for erd_layout.ir.graph — GraphIndex construction, edge filtering, topology queries."""

from erd_layout.ir.graph import GraphIndex
from erd_layout.types import Edge, Node


def _nodes(*ids: str) -> list[Node]:
    return [Node(id=i) for i in ids]


def _edges(*pairs: tuple[str, str]) -> list[Edge]:
    return [Edge(source=s, target=t) for s, t in pairs]


class TestBasicConstruction:
    def test_empty(self):
        index = GraphIndex.build([], [])
        assert index.node_count() == 0
        assert index.edge_count() == 0
        assert index.node_ids == []

    def test_every_node_initialised(self):
        index = GraphIndex.build(_nodes("A", "B", "C"), [])
        assert index.outgoing == {"A": [], "B": [], "C": []}
        assert index.incoming == {"A": [], "B": [], "C": []}
        assert index.in_degree == {"A": 0, "B": 0, "C": 0}

    def test_node_order_preserved(self):
        index = GraphIndex.build(_nodes("Z", "A", "M"), [])
        assert index.node_ids == ["Z", "A", "M"]

    def test_adjacency_populated(self):
        index = GraphIndex.build(_nodes("A", "B", "C"), _edges(("A", "B"), ("A", "C"), ("B", "C")))
        assert index.outgoing["A"] == ["B", "C"]
        assert index.incoming["C"] == ["A", "B"]
        assert index.in_degree == {"A": 0, "B": 1, "C": 2}
        assert index.edge_count() == 3


class TestEdgeFiltering:
    def test_dangling_source_skipped(self):
        index = GraphIndex.build(_nodes("A"), _edges(("ghost", "A")))
        assert index.in_degree["A"] == 0
        assert index.skipped_edges == 1

    def test_dangling_target_skipped(self):
        index = GraphIndex.build(_nodes("A"), _edges(("A", "ghost")))
        assert index.outgoing["A"] == []
        assert "ghost" not in index.incoming
        assert index.skipped_edges == 1

    def test_self_loop_skipped(self):
        index = GraphIndex.build(_nodes("A"), _edges(("A", "A")))
        assert index.outgoing["A"] == []
        assert index.in_degree["A"] == 0
        assert index.skipped_edges == 1

    def test_duplicate_edges_kept(self):
        index = GraphIndex.build(_nodes("A", "B"), _edges(("A", "B"), ("A", "B")))
        assert index.outgoing["A"] == ["B", "B"]
        assert index.in_degree["B"] == 2


class TestTopology:
    def test_dag(self):
        index = GraphIndex.build(_nodes("A", "B", "C"), _edges(("A", "B"), ("B", "C")))
        assert index.is_dag()
        assert index.cyclic_nodes() == set()

    def test_cycle_detected(self):
        index = GraphIndex.build(
            _nodes("A", "X", "Y", "Z"),
            _edges(("A", "X"), ("X", "Y"), ("Y", "Z"), ("Z", "X")),
        )
        assert not index.is_dag()
        assert index.cyclic_nodes() == {"X", "Y", "Z"}

    def test_self_loop_is_not_a_cycle(self):
        index = GraphIndex.build(_nodes("A"), _edges(("A", "A")))
        assert index.is_dag()

    def test_networkx_view_keeps_parallel_edges(self):
        index = GraphIndex.build(_nodes("A", "B"), _edges(("A", "B"), ("A", "B")))
        g = index.digraph
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 2

    def test_label_of_falls_back_to_id(self):
        index = GraphIndex.build([Node(id="Users"), Node(id="o", label="Orders")], [])
        assert index.label_of("Users") == "users"
        assert index.label_of("o") == "orders"
