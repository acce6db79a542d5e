"""Topological ordering of directed graphs."""

import heapq
import logging
from collections.abc import Hashable

from ._errors import CycleDetectedError
from ._graph import Graph

logger = logging.getLogger(__name__)


def topo_sort[T: Hashable](graph: Graph[T]) -> list[T]:
    """Sort a graph topologically using Kahn's algorithm.

    Nodes with in-degree zero are removed one at a time, always taking the
    lowest id among the available ones, so the result is deterministic for a
    given graph regardless of how it enumerates its nodes.

    Args:
        graph: Any graph implementing the ``Graph`` protocol. It is not modified.

    Returns:
        Every node id exactly once, each before all of its successors.

    Raises:
        CycleDetectedError: If the graph contains a cycle. ``remainder`` holds
            the nodes that could not be ordered.

    Example:
        >>> from graphx import DiGraph
        >>> topo_sort(DiGraph.from_edges([("b", "c"), ("a", "b")]))
        ['a', 'b', 'c']

    """
    indegree: dict[T, int] = {node: graph.in_degree(node) for node in graph.nodes()}

    ready = [node for node, deg in indegree.items() if deg == 0]
    heapq.heapify(ready)
    order: list[T] = []

    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for successor in graph.neighbors(node):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                heapq.heappush(ready, successor)

    if len(order) != len(indegree):
        placed = set(order)
        remainder = frozenset(node for node in indegree if node not in placed)
        logger.debug("Topological sort stopped with %d of %d nodes unordered", len(remainder), len(indegree))
        raise CycleDetectedError(remainder)

    logger.debug("Topologically sorted %d nodes", len(order))
    return order


def has_cycle(graph: Graph) -> bool:
    """Check if the graph contains a cycle.

    Returns:
        True if the graph has a cycle, False otherwise.

    """
    try:
        topo_sort(graph)
    except CycleDetectedError:
        return True
    return False
