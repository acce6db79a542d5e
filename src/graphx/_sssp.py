"""Single-source shortest paths on weighted DAGs."""

import logging
import math
from collections.abc import Hashable, Iterator, Mapping
from typing import NamedTuple

from ._errors import CycleDetectedError, NegativeWeightError, NodeNotFoundError, NotADAGError
from ._graph import DEFAULT_EDGE_WEIGHT, Graph
from ._topsort import topo_sort

logger = logging.getLogger(__name__)


class ShortestPath[T: Hashable](NamedTuple):
    """Distance from the source and the node the best path arrives from."""

    distance: float
    predecessor: T | None


class DistanceTable[T: Hashable](Mapping[T, ShortestPath[T]]):
    """Read-only result of ``sssp_dag``.

    Maps every node of the graph to its ``ShortestPath``. Unreachable nodes
    have distance ``math.inf`` and no predecessor.
    """

    __slots__ = ("_entries", "_source")

    def __init__(self, source: T, entries: dict[T, ShortestPath[T]]) -> None:
        self._source = source
        self._entries = entries

    @property
    def source(self) -> T:
        return self._source

    def __getitem__(self, node: T) -> ShortestPath[T]:
        return self._entries[node]

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DistanceTable(source={self._source!r}, {self._entries!r})"

    def distance(self, node: T) -> float:
        return self._entries[node].distance

    def predecessor(self, node: T) -> T | None:
        return self._entries[node].predecessor

    def is_reachable(self, node: T) -> bool:
        return not math.isinf(self._entries[node].distance)

    def reachable(self) -> frozenset[T]:
        """All nodes with a finite distance, the source included."""
        return frozenset(node for node, entry in self._entries.items() if not math.isinf(entry.distance))

    def path_to(self, node: T) -> list[T] | None:
        """Reconstruct the shortest path from the source to ``node``.

        Returns:
            The nodes along the path, source first, or None if ``node`` is
            unreachable.

        Raises:
            KeyError: If ``node`` is not in the table.

        """
        if not self.is_reachable(node):
            return None
        path = [node]
        current = self._entries[node].predecessor
        while current is not None:
            path.append(current)
            current = self._entries[current].predecessor
        path.reverse()
        return path


def sssp_dag[T: Hashable](graph: Graph[T], source: T) -> DistanceTable[T]:
    """Compute shortest distances from ``source`` on a directed acyclic graph.

    Nodes are processed in topological order and every outgoing edge of a
    reachable node is relaxed once, so the whole computation is O(V + E).
    Unweighted edges count as ``DEFAULT_EDGE_WEIGHT``.

    Args:
        graph: A DAG implementing the ``Graph`` protocol. It is not modified.
        source: Id of the start node.

    Returns:
        DistanceTable covering every node of the graph.

    Raises:
        NodeNotFoundError: If ``source`` is not in the graph.
        NotADAGError: If the graph contains a cycle.
        NegativeWeightError: If a relaxed edge has a negative weight.

    Example:
        >>> from graphx import DiGraph
        >>> g = DiGraph.from_edges([("a", "b", 1), ("b", "c", 2), ("a", "c", 5)])
        >>> sssp_dag(g, "a").distance("c")
        3.0

    """
    if source not in graph:
        raise NodeNotFoundError(source)

    try:
        order = topo_sort(graph)
    except CycleDetectedError as e:
        raise NotADAGError(e.remainder) from e

    distance: dict[T, float] = dict.fromkeys(order, math.inf)
    predecessor: dict[T, T | None] = dict.fromkeys(order)
    distance[source] = 0.0

    relaxed = 0
    for node in order:
        base = distance[node]
        if math.isinf(base):
            continue
        for successor, weight in graph.out_edges(node):
            w = DEFAULT_EDGE_WEIGHT if weight is None else weight
            if w < 0:
                raise NegativeWeightError(node, successor, w)
            relaxed += 1
            if base + w < distance[successor]:
                distance[successor] = base + w
                predecessor[successor] = node

    logger.debug("Relaxed %d edges from %r over %d nodes", relaxed, source, len(order))
    return DistanceTable(source, {node: ShortestPath(distance[node], predecessor[node]) for node in order})
