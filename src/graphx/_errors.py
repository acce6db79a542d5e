"""Exception hierarchy shared by the graph model and the algorithms."""

from collections.abc import Hashable


class GraphError(Exception):
    """Base class for all graphx errors."""


class NodeNotFoundError(GraphError):
    """A node id was referenced that does not exist in the graph."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node not found: {node!r}")


class DuplicateNodeError(GraphError):
    """A node id was added twice to the same graph."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node already exists: {node!r}")


class DuplicateEdgeError(GraphError):
    """An edge between the same ordered pair of nodes was added twice."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge already exists: {source!r} -> {target!r}")


class CycleDetectedError(GraphError):
    """The graph contains a cycle, so no topological order exists.

    Attributes:
        remainder: Nodes that could never reach in-degree zero. Every cycle
            of the graph lies inside this set.

    """

    def __init__(self, remainder: frozenset[Hashable]) -> None:
        self.remainder = remainder
        super().__init__(f"Cycle detected in graph ({len(remainder)} nodes could not be ordered)")


class SsspError(GraphError):
    """Base class for failures of the shortest-path solver."""


class NotADAGError(SsspError):
    """Shortest paths were requested on a graph that is not acyclic."""

    def __init__(self, remainder: frozenset[Hashable]) -> None:
        self.remainder = remainder
        super().__init__("Graph is not a DAG")


class NegativeWeightError(SsspError):
    """A negative edge weight was met while relaxing edges."""

    def __init__(self, source: Hashable, target: Hashable, weight: float) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(f"Negative weight {weight} on edge {source!r} -> {target!r}")


class ConfigError(GraphError):
    """Invalid matcher configuration."""
