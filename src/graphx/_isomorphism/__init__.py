"""Subgraph isomorphism: matching protocols and the backtracking matcher."""

from ._matcher import find_subgraph_isomorphism, is_isomorphic, iter_subgraph_isomorphisms
from ._model import GMGraph, GMNode

__all__ = ["GMGraph", "GMNode", "find_subgraph_isomorphism", "is_isomorphic", "iter_subgraph_isomorphisms"]
