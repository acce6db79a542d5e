"""Capability protocols every graph algorithm in graphx is written against."""

from collections.abc import Hashable, Iterable, Sequence
from numbers import Real
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Node[T: Hashable](Protocol):
    """A node owned by a graph: an identity plus an optional label."""

    @property
    def id(self) -> T: ...

    @property
    def label(self) -> Any: ...


@runtime_checkable
class Graph[T: Hashable](Protocol):
    """Minimal read-only view of a directed graph.

    Node ids must be hashable and mutually comparable; algorithms use the
    ordering of ids to break ties deterministically.

    All per-node queries raise ``NodeNotFoundError`` for unknown ids.
    """

    def nodes(self) -> Iterable[T]:
        """Enumerate all node ids. Order carries no meaning."""
        ...

    def __contains__(self, node: object) -> bool: ...

    def __len__(self) -> int: ...

    def neighbors(self, node: T) -> Sequence[T]:
        """Outgoing neighbor ids of ``node``, each exactly once."""
        ...

    def out_edges(self, node: T) -> Iterable[tuple[T, Real | None]]:
        """Outgoing ``(neighbor, weight)`` pairs; weight is ``None`` for unweighted edges."""
        ...

    def in_degree(self, node: T) -> int: ...

    def out_degree(self, node: T) -> int: ...
