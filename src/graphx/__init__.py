"""Generic directed graph algorithms."""

__all__ = [
    "DEFAULT_EDGE_WEIGHT",
    "ConfigError",
    "CycleDetectedError",
    "DiGraph",
    "DiNode",
    "DistanceTable",
    "DuplicateEdgeError",
    "DuplicateNodeError",
    "GMGraph",
    "GMNode",
    "Graph",
    "GraphError",
    "IsomorphismMode",
    "MatchConfig",
    "NegativeWeightError",
    "Node",
    "NodeNotFoundError",
    "NotADAGError",
    "ShortestPath",
    "SsspError",
    "configure_logging",
    "find_subgraph_isomorphism",
    "has_cycle",
    "is_isomorphic",
    "iter_subgraph_isomorphisms",
    "labels_equal",
    "new_graph",
    "sssp_dag",
    "topo_sort",
]

from ._config import IsomorphismMode, MatchConfig, labels_equal
from ._errors import (
    ConfigError,
    CycleDetectedError,
    DuplicateEdgeError,
    DuplicateNodeError,
    GraphError,
    NegativeWeightError,
    NodeNotFoundError,
    NotADAGError,
    SsspError,
)
from ._graph import DEFAULT_EDGE_WEIGHT, DiGraph, DiNode, Graph, Node, new_graph
from ._isomorphism import GMGraph, GMNode, find_subgraph_isomorphism, is_isomorphic, iter_subgraph_isomorphisms
from ._logging import configure_logging
from ._sssp import DistanceTable, ShortestPath, sssp_dag
from ._topsort import has_cycle, topo_sort
