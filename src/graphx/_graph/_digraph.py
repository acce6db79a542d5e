"""Adjacency-list directed graph."""

from __future__ import annotations

import math
from collections.abc import Container, Hashable, Iterable, Iterator, Mapping
from numbers import Real
from typing import Any

from graphx._errors import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError

DEFAULT_EDGE_WEIGHT = 1.0
"""Weight an unweighted edge contributes to a path length."""


class DiNode[T: Hashable]:
    """A node of a DiGraph.

    Nodes are created by ``DiGraph.add_node`` and belong to exactly one graph.
    The id is fixed at creation because the owning graph keys the node by it.
    The adjacency sets are maintained by the owning graph; use the read-only
    properties to inspect them.

    Attributes:
        id: Identity of the node, unique within its graph.
        label: Optional attribute used for semantic matching.

    """

    __slots__ = ("_id", "_predecessors", "_successors", "label")

    def __init__(self, node_id: T, label: Any = None) -> None:
        self._id = node_id
        self.label = label
        self._predecessors: set[T] = set()
        # successor id -> edge weight (None for an unweighted edge)
        self._successors: dict[T, Real | None] = {}

    def __repr__(self) -> str:
        return f"DiNode(id={self._id!r}, label={self.label!r})"

    @property
    def id(self) -> T:
        return self._id

    @property
    def predecessors(self) -> frozenset[T]:
        """Ids of nodes with an edge into this node."""
        return frozenset(self._predecessors)

    @property
    def successors(self) -> frozenset[T]:
        """Ids of nodes this node has an edge to."""
        return frozenset(self._successors)

    @property
    def in_degree(self) -> int:
        return len(self._predecessors)

    @property
    def out_degree(self) -> int:
        return len(self._successors)

    @property
    def degree(self) -> int:
        """Total number of incident edge endpoints (a self-loop counts twice)."""
        return self.in_degree + self.out_degree


def _check_weight(weight: Real | None) -> Real | None:
    if weight is None:
        return None
    if isinstance(weight, bool) or not isinstance(weight, Real):
        msg = f"Edge weight must be a real number, got {type(weight).__name__}"
        raise TypeError(msg)
    if math.isnan(weight):
        msg = "Edge weight must not be NaN"
        raise ValueError(msg)
    return weight


class DiGraph[T: Hashable]:
    """A directed graph backed by per-node adjacency sets.

    Construction is strict: ``add_node`` rejects an id that already exists and
    ``add_edge`` rejects unknown endpoints and repeated edges. Self-loops are
    allowed. Once built, the graph is only read by the algorithms.

    Example:
        >>> g = DiGraph()
        >>> g.add_node("a")
        >>> g.add_node("b")
        >>> g.add_edge("a", "b", 2.0)
        >>> g.neighbors("a")
        ['b']

    """

    __slots__ = ("_edge_count", "_nodes", "name")

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._nodes: dict[T, DiNode[T]] = {}
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T] | tuple[T, T, Real | None]],
        labels: Mapping[T, Any] | None = None,
        name: str | None = None,
    ) -> DiGraph[T]:
        """Build a graph from ``(source, target)`` or ``(source, target, weight)`` tuples.

        Endpoints that are not yet present are created on the fly, without a
        label unless one is given in ``labels``. Nodes listed in ``labels`` are
        added first, so isolated nodes can be declared there.

        Args:
            edges: Edges to insert, in order.
            labels: Optional mapping from node id to label.
            name: Optional name of the graph.

        Returns:
            A new DiGraph instance.

        Raises:
            DuplicateEdgeError: If the same ordered pair appears twice.

        Example:
            >>> g = DiGraph.from_edges([("a", "b", 1.0), ("b", "c")])
            >>> sorted(g.nodes())
            ['a', 'b', 'c']

        """
        graph: DiGraph[T] = cls(name)
        for node, label in (labels or {}).items():
            graph.add_node(node, label)
        for edge in edges:
            source, target = edge[0], edge[1]
            weight = edge[2] if len(edge) > 2 else None  # noqa: PLR2004
            for endpoint in (source, target):
                if endpoint not in graph:
                    graph.add_node(endpoint)
            graph.add_edge(source, target, weight)
        return graph

    # -- construction -----------------------------------------------------

    def add_node(self, node: T, label: Any = None) -> None:
        """Add a node with an optional label.

        Raises:
            DuplicateNodeError: If a node with this id already exists.

        """
        if node in self._nodes:
            raise DuplicateNodeError(node)
        self._nodes[node] = DiNode(node, label)

    def add_edge(self, source: T, target: T, weight: Real | None = None) -> None:
        """Add the directed edge ``source -> target``.

        Negative weights are stored as given; only the shortest-path solver
        rejects them.

        Raises:
            NodeNotFoundError: If either endpoint is unknown.
            DuplicateEdgeError: If the edge already exists.
            TypeError: If ``weight`` is not a number.
            ValueError: If ``weight`` is NaN.

        """
        src = self.node(source)
        dst = self.node(target)
        if target in src._successors:
            raise DuplicateEdgeError(source, target)
        src._successors[target] = _check_weight(weight)
        dst._predecessors.add(source)
        self._edge_count += 1

    # -- node queries -----------------------------------------------------

    def node(self, node: T) -> DiNode[T]:
        """Get the DiNode for an id.

        Raises:
            NodeNotFoundError: If no node has this id.

        """
        try:
            return self._nodes[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def nodes(self) -> list[T]:
        """All node ids, in insertion order."""
        return list(self._nodes)

    def has_node(self, node: object) -> bool:
        return node in self._nodes

    def label(self, node: T) -> Any:
        return self.node(node).label

    def neighbors(self, node: T) -> list[T]:
        """Outgoing neighbors of a node."""
        return list(self.node(node)._successors)

    def successors(self, node: T) -> list[T]:
        """Alias of ``neighbors``."""
        return self.neighbors(node)

    def predecessors(self, node: T) -> list[T]:
        """Nodes with an edge into ``node``."""
        return list(self.node(node)._predecessors)

    def all_neighbors(self, node: T) -> set[T]:
        """Predecessors and successors of a node combined, excluding the node itself."""
        n = self.node(node)
        return (n._predecessors | n._successors.keys()) - {node}

    def out_edges(self, node: T) -> Iterator[tuple[T, Real | None]]:
        return iter(self.node(node)._successors.items())

    def in_degree(self, node: T) -> int:
        return self.node(node).in_degree

    def out_degree(self, node: T) -> int:
        return self.node(node).out_degree

    def degree(self, node: T) -> int:
        return self.node(node).degree

    # -- edge queries -----------------------------------------------------

    def has_edge(self, source: T, target: T) -> bool:
        """Check whether the edge ``source -> target`` exists.

        Unknown endpoints simply yield False.
        """
        src = self._nodes.get(source)
        return src is not None and target in src._successors

    def weight(self, source: T, target: T) -> Real | None:
        """Weight of the edge ``source -> target`` (None if unweighted).

        Raises:
            NodeNotFoundError: If ``source`` is unknown.
            KeyError: If the edge does not exist.

        """
        successors = self.node(source)._successors
        if target not in successors:
            msg = f"No edge {source!r} -> {target!r}"
            raise KeyError(msg)
        return successors[target]

    def edges(self) -> Iterator[tuple[T, T, Real | None]]:
        """Yield every edge as ``(source, target, weight)``."""
        for source, n in self._nodes.items():
            for target, weight in n._successors.items():
                yield source, target, weight

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return self._edge_count

    # -- reachability -----------------------------------------------------

    def ancestors(self, node: T) -> frozenset[T]:
        """All nodes from which ``node`` can be reached."""
        visited: set[T] = set()
        stack = self.predecessors(node)
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self._nodes[current]._predecessors)
        return frozenset(visited)

    def descendants(self, node: T) -> frozenset[T]:
        """All nodes reachable from ``node``."""
        visited: set[T] = set()
        stack = self.successors(node)
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self._nodes[current]._successors)
        return frozenset(visited)

    # -- matching capability ----------------------------------------------

    def next_candidate(self, mapped: Container[T]) -> T | None:
        """Pick the next unmapped node to extend a partial mapping with.

        Prefers the node with the most already-mapped neighbors (in either
        direction); ties go to the lowest id. Returns None once every node is
        mapped.
        """
        best: T | None = None
        best_key: tuple[int, T] | None = None
        for node, n in self._nodes.items():
            if node in mapped:
                continue
            linked = sum(
                1
                for other in (n._predecessors | n._successors.keys())
                if other != node and other in mapped
            )
            key = (-linked, node)
            if best_key is None or key < best_key:
                best, best_key = node, key
        return best

    def candidate_images(self, used: Container[T]) -> list[T]:
        """Node ids not yet used as an image, lowest id first."""
        return sorted(node for node in self._nodes if node not in used)

    # -- dunder -----------------------------------------------------------

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._nodes

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"DiGraph(name={self.name!r}, nodes={len(self._nodes)}, edges={self._edge_count})"


def new_graph[T: Hashable](name: str | None = None) -> DiGraph[T]:
    """Create an empty directed graph."""
    return DiGraph(name)
