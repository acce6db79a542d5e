"""Matching capability layered on top of the base graph protocols."""

from collections.abc import Container, Hashable, Iterable
from typing import Any, Protocol, runtime_checkable

from graphx._graph import Graph


@runtime_checkable
class GMNode[T: Hashable](Protocol):
    """A node whose label takes part in feasibility pruning."""

    @property
    def id(self) -> T: ...

    @property
    def label(self) -> Any: ...


@runtime_checkable
class GMGraph[T: Hashable](Graph[T], Protocol):
    """A graph that can drive a subgraph isomorphism search.

    Extends ``Graph`` with reverse adjacency, edge lookup and the two
    candidate-generation hooks the matcher relies on.
    """

    def node(self, node: T) -> GMNode[T]: ...

    def predecessors(self, node: T) -> Iterable[T]: ...

    def successors(self, node: T) -> Iterable[T]: ...

    def has_edge(self, source: T, target: T) -> bool: ...

    def edge_count(self) -> int: ...

    def next_candidate(self, mapped: Container[T]) -> T | None:
        """Next unmapped node to extend a partial mapping with, or None when all are mapped.

        The node with the most already-mapped neighbors wins; ties go to the
        lowest id.
        """
        ...

    def candidate_images(self, used: Container[T]) -> list[T]:
        """Nodes not yet used as an image, lowest id first."""
        ...
