"""Graph model: capability protocols and the adjacency-list DiGraph.

This module contains:
- Node / Graph: protocols the algorithms are written against
- DiGraph / DiNode: the concrete directed graph
"""

from ._digraph import DEFAULT_EDGE_WEIGHT, DiGraph, DiNode, new_graph
from ._protocols import Graph, Node

__all__ = ["DEFAULT_EDGE_WEIGHT", "DiGraph", "DiNode", "Graph", "Node", "new_graph"]
