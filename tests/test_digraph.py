"""Tests for DiGraph construction and queries."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from graphx import (
    DiGraph,
    DiNode,
    DuplicateEdgeError,
    DuplicateNodeError,
    GMGraph,
    Graph,
    Node,
    NodeNotFoundError,
    new_graph,
    sssp_dag,
)


def _abc_graph() -> DiGraph[str]:
    graph: DiGraph[str] = new_graph()
    for node in "abc":
        graph.add_node(node)
    graph.add_edge("a", "b", 1.0)
    graph.add_edge("b", "c", 2.0)
    graph.add_edge("a", "c")
    return graph


class TestDiGraphConstruction:
    """Tests for add_node / add_edge."""

    def test_empty_graph(self) -> None:
        graph = new_graph()
        assert graph.nodes() == []
        assert len(graph) == 0
        assert graph.edge_count() == 0

    def test_name(self) -> None:
        graph = new_graph("roads")
        assert graph.name == "roads"
        graph.name = None
        assert graph.name is None

    def test_add_node_with_label(self) -> None:
        graph = new_graph()
        graph.add_node("a", "red")
        assert graph.label("a") == "red"
        assert graph.node("a").label == "red"

    def test_duplicate_node_rejected(self) -> None:
        graph = new_graph()
        graph.add_node("a", "red")
        with pytest.raises(DuplicateNodeError, match="already exists") as exc_info:
            graph.add_node("a", "blue")
        assert exc_info.value.node == "a"
        # the original label is kept
        assert graph.label("a") == "red"

    def test_edge_to_unknown_node(self) -> None:
        graph = new_graph()
        graph.add_node("a")
        with pytest.raises(NodeNotFoundError, match="'b'") as exc_info:
            graph.add_edge("a", "b")
        assert exc_info.value.node == "b"
        assert graph.edge_count() == 0
        assert graph.out_degree("a") == 0

    def test_edge_from_unknown_node(self) -> None:
        graph = new_graph()
        graph.add_node("b")
        with pytest.raises(NodeNotFoundError):
            graph.add_edge("a", "b")
        assert graph.in_degree("b") == 0

    def test_duplicate_edge_rejected(self) -> None:
        graph = _abc_graph()
        with pytest.raises(DuplicateEdgeError) as exc_info:
            graph.add_edge("a", "b", 7.0)
        assert (exc_info.value.source, exc_info.value.target) == ("a", "b")
        assert graph.weight("a", "b") == 1.0
        assert graph.edge_count() == 3

    def test_reverse_edge_is_not_duplicate(self) -> None:
        graph = _abc_graph()
        graph.add_edge("b", "a")
        assert graph.has_edge("b", "a")
        assert graph.edge_count() == 4

    def test_self_loop_allowed(self) -> None:
        graph = new_graph()
        graph.add_node("a")
        graph.add_edge("a", "a")
        assert graph.neighbors("a") == ["a"]
        assert graph.in_degree("a") == 1
        assert graph.out_degree("a") == 1
        assert graph.all_neighbors("a") == set()

    def test_negative_weight_accepted(self) -> None:
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("b")
        graph.add_edge("a", "b", -3)
        assert graph.weight("a", "b") == -3

    @pytest.mark.parametrize("weight", ["1", True, [1], Decimal("1.5")])
    def test_non_numeric_weight_rejected(self, weight: object) -> None:
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("b")
        with pytest.raises(TypeError, match="must be a real number"):
            graph.add_edge("a", "b", weight)  # type: ignore[arg-type]
        assert not graph.has_edge("a", "b")

    def test_fraction_weights_accepted(self) -> None:
        graph = DiGraph.from_edges(
            [("a", "b", Fraction(1, 2)), ("b", "c", Fraction(1, 4)), ("a", "c", Fraction(1))],
        )
        assert graph.weight("a", "b") == Fraction(1, 2)
        table = sssp_dag(graph, "a")
        assert table.distance("c") == Fraction(3, 4)
        assert table.predecessor("c") == "b"

    def test_nan_weight_rejected(self) -> None:
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("b")
        with pytest.raises(ValueError, match="NaN"):
            graph.add_edge("a", "b", math.nan)


class TestDiGraphFromEdges:
    """Tests for the from_edges constructor."""

    def test_creates_missing_nodes(self) -> None:
        graph = DiGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.nodes() == ["a", "b", "c"]
        assert graph.edge_count() == 2

    def test_weights_and_labels(self) -> None:
        graph = DiGraph.from_edges([("a", "b", 2.5)], labels={"a": "A", "z": "Z"})
        assert graph.weight("a", "b") == 2.5
        assert graph.label("a") == "A"
        assert graph.label("b") is None
        assert "z" in graph
        assert graph.degree("z") == 0

    def test_duplicate_edge_rejected(self) -> None:
        with pytest.raises(DuplicateEdgeError):
            DiGraph.from_edges([("a", "b"), ("a", "b")])

    def test_works_with_integers(self) -> None:
        graph = DiGraph.from_edges([(1, 2), (2, 3)])
        assert graph.successors(1) == [2]
        assert graph.predecessors(3) == [2]


class TestDiGraphQueries:
    """Tests for adjacency and degree queries."""

    def test_neighbors_are_outgoing(self) -> None:
        graph = _abc_graph()
        assert sorted(graph.neighbors("a")) == ["b", "c"]
        assert graph.neighbors("c") == []

    def test_predecessors(self) -> None:
        graph = _abc_graph()
        assert sorted(graph.predecessors("c")) == ["a", "b"]
        assert graph.predecessors("a") == []

    def test_degrees(self) -> None:
        graph = _abc_graph()
        assert graph.in_degree("c") == 2
        assert graph.out_degree("a") == 2
        assert graph.degree("b") == 2

    def test_all_neighbors(self) -> None:
        graph = _abc_graph()
        assert graph.all_neighbors("b") == {"a", "c"}

    def test_out_edges_carry_weights(self) -> None:
        graph = _abc_graph()
        assert dict(graph.out_edges("a")) == {"b": 1.0, "c": None}

    def test_edges(self) -> None:
        graph = _abc_graph()
        assert sorted(graph.edges(), key=lambda e: (e[0], e[1])) == [
            ("a", "b", 1.0),
            ("a", "c", None),
            ("b", "c", 2.0),
        ]

    def test_has_edge_is_directed(self) -> None:
        graph = _abc_graph()
        assert graph.has_edge("a", "b")
        assert not graph.has_edge("b", "a")
        assert not graph.has_edge("x", "a")

    def test_weight_of_missing_edge(self) -> None:
        graph = _abc_graph()
        with pytest.raises(KeyError, match="No edge"):
            graph.weight("c", "a")

    @pytest.mark.parametrize(
        "query",
        ["neighbors", "predecessors", "in_degree", "out_degree", "degree", "out_edges", "node", "label"],
    )
    def test_unknown_node_raises(self, query: str) -> None:
        graph = _abc_graph()
        with pytest.raises(NodeNotFoundError):
            getattr(graph, query)("missing")

    def test_contains_and_iter(self) -> None:
        graph = _abc_graph()
        assert "a" in graph
        assert "x" not in graph
        assert graph.has_node("b")
        assert list(graph) == ["a", "b", "c"]
        assert graph.node_count() == len(graph) == 3

    def test_node_views_are_read_only_copies(self) -> None:
        graph = _abc_graph()
        node = graph.node("a")
        assert isinstance(node, DiNode)
        assert node.successors == frozenset({"b", "c"})
        assert node.predecessors == frozenset()
        assert node.out_degree == 2

    def test_node_id_is_read_only(self) -> None:
        graph = _abc_graph()
        with pytest.raises(AttributeError):
            graph.node("a").id = "zzz"  # type: ignore[misc]
        assert graph.node("a").id == "a"
        assert "zzz" not in graph
        assert sorted(graph.successors("a")) == ["b", "c"]

    def test_repr(self) -> None:
        assert repr(_abc_graph()) == "DiGraph(name=None, nodes=3, edges=3)"


class TestDiGraphReachability:
    """Tests for transitive queries (ancestors/descendants)."""

    def test_ancestors_diamond(self) -> None:
        # a -> b -> d, a -> c -> d
        graph = DiGraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        assert graph.ancestors("d") == frozenset({"a", "b", "c"})
        assert graph.ancestors("a") == frozenset()

    def test_descendants_simple(self) -> None:
        graph = DiGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.descendants("a") == frozenset({"b", "c"})
        assert graph.descendants("c") == frozenset()

    def test_descendants_with_cycle(self) -> None:
        graph = DiGraph.from_edges([("a", "b"), ("b", "a")])
        assert graph.descendants("a") == frozenset({"a", "b"})


class TestMatchingCapability:
    """Tests for the candidate-generation hooks used by the matcher."""

    def test_next_candidate_starts_at_lowest_id(self) -> None:
        graph = DiGraph.from_edges([("c", "b"), ("b", "a")])
        assert graph.next_candidate(set()) == "a"

    def test_next_candidate_prefers_most_mapped_neighbors(self) -> None:
        # d is linked to both a and b, c only to a
        graph = DiGraph.from_edges([("a", "c"), ("a", "d"), ("d", "b")])
        assert graph.next_candidate({"a", "b"}) == "d"

    def test_next_candidate_tie_goes_to_lowest_id(self) -> None:
        graph = DiGraph.from_edges([("a", "c"), ("a", "b")])
        assert graph.next_candidate({"a"}) == "b"

    def test_next_candidate_none_when_all_mapped(self) -> None:
        graph = DiGraph.from_edges([("a", "b")])
        assert graph.next_candidate({"a", "b"}) is None

    def test_candidate_images_sorted_and_unused(self) -> None:
        graph = DiGraph.from_edges([("c", "a"), ("b", "d")])
        assert graph.candidate_images({"b"}) == ["a", "c", "d"]


class TestProtocols:
    """DiGraph and DiNode satisfy the capability protocols."""

    def test_digraph_is_graph(self) -> None:
        graph = _abc_graph()
        assert isinstance(graph, Graph)
        assert isinstance(graph, GMGraph)

    def test_dinode_is_node(self) -> None:
        assert isinstance(_abc_graph().node("a"), Node)
