"""VF2-style backtracking search for subgraph isomorphisms."""

import dataclasses
import logging
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from graphx._config import DEFAULT_MATCH_CONFIG, IsomorphismMode, MatchConfig

from ._model import GMGraph

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


@dataclass(slots=True)
class _Frame[P: Hashable, Q: Hashable]:
    """One level of the search: a pattern node and its remaining target candidates."""

    node: P
    candidates: Iterator[Q]


class _Matcher[P: Hashable, Q: Hashable]:
    """Search state for one pattern/target pair.

    ``core`` maps pattern nodes to target nodes and ``inverse`` holds the
    reverse direction; both always describe the same partial mapping.
    """

    def __init__(self, pattern: GMGraph[P], target: GMGraph[Q], config: MatchConfig) -> None:
        self.pattern = pattern
        self.target = target
        self.config = config
        self.induced = config.induced
        self.core: dict[P, Q] = {}
        self.inverse: dict[Q, P] = {}
        self.checked = 0

    def _map(self, node: P, image: Q) -> None:
        self.core[node] = image
        self.inverse[image] = node

    def _unmap(self, node: P) -> None:
        del self.inverse[self.core.pop(node)]

    def _labels_compatible(self, node: P, image: Q) -> bool:
        return self.config.label_compatible(self.pattern.node(node).label, self.target.node(image).label)

    def _self_loops_agree(self, node: P, image: Q) -> bool:
        p_loop = self.pattern.has_edge(node, node)
        t_loop = self.target.has_edge(image, image)
        if self.induced:
            return p_loop == t_loop
        return t_loop or not p_loop

    def _edges_agree(self, node: P, image: Q) -> bool:
        """Check edges between the new pair and the already-mapped pairs."""
        pattern, target = self.pattern, self.target
        for pred in pattern.predecessors(node):
            if pred != node and pred in self.core and not target.has_edge(self.core[pred], image):
                return False
        for succ in pattern.successors(node):
            if succ != node and succ in self.core and not target.has_edge(image, self.core[succ]):
                return False
        if not self.induced:
            return True
        for pred in target.predecessors(image):
            if pred != image and pred in self.inverse and not pattern.has_edge(self.inverse[pred], node):
                return False
        for succ in target.successors(image):
            if succ != image and succ in self.inverse and not pattern.has_edge(node, self.inverse[succ]):
                return False
        return True

    def _look_ahead(self, node: P, image: Q) -> bool:
        """Prune pairs whose unmapped neighborhood is too small to ever complete."""
        p_in = {n for n in self.pattern.predecessors(node) if n != node and n not in self.core}
        p_out = {n for n in self.pattern.successors(node) if n != node and n not in self.core}
        t_in = {n for n in self.target.predecessors(image) if n != image and n not in self.inverse}
        t_out = {n for n in self.target.successors(image) if n != image and n not in self.inverse}
        return len(t_in) >= len(p_in) and len(t_out) >= len(p_out) and len(t_in | t_out) >= len(p_in | p_out)

    def is_feasible(self, node: P, image: Q) -> bool:
        self.checked += 1
        if self.target.in_degree(image) < self.pattern.in_degree(node):
            return False
        if self.target.out_degree(image) < self.pattern.out_degree(node):
            return False
        return (
            self._labels_compatible(node, image)
            and self._self_loops_agree(node, image)
            and self._edges_agree(node, image)
            and self._look_ahead(node, image)
        )

    def _push_frame(self, stack: list[_Frame[P, Q]]) -> None:
        node = self.pattern.next_candidate(self.core)
        stack.append(_Frame(node, iter(self.target.candidate_images(self.inverse))))

    def run(self) -> Iterator[Mapping[P, Q]]:
        """Yield every complete mapping in search order.

        The search keeps an explicit stack of frames. Before a frame tries its
        next candidate, the pair it mapped last is undone.
        """
        size = len(self.pattern)
        limit = self.config.max_mappings
        found = 0
        stack: list[_Frame[P, Q]] = []
        self._push_frame(stack)

        while stack:
            frame = stack[-1]
            if frame.node in self.core:
                self._unmap(frame.node)

            image = next((c for c in frame.candidates if self.is_feasible(frame.node, c)), _EXHAUSTED)
            if image is _EXHAUSTED:
                stack.pop()
                continue

            self._map(frame.node, image)
            if len(self.core) < size:
                self._push_frame(stack)
                continue

            found += 1
            logger.debug("Found mapping #%d after %d feasibility checks", found, self.checked)
            yield MappingProxyType(dict(self.core))
            if limit is not None and found >= limit:
                return

        logger.debug("Search exhausted: %d mappings, %d feasibility checks", found, self.checked)


def iter_subgraph_isomorphisms[P: Hashable, Q: Hashable](
    pattern: GMGraph[P],
    target: GMGraph[Q],
    config: MatchConfig | None = None,
) -> Iterator[Mapping[P, Q]]:
    """Enumerate mappings of ``pattern`` into ``target``.

    Each mapping is injective, preserves edge direction and maps nodes onto
    label-compatible nodes. In ``INDUCED`` mode (the default) edges that the
    target has between mapped nodes must also exist in the pattern.

    Args:
        pattern: The graph to look for.
        target: The graph to search in.
        config: Search options; defaults to ``MatchConfig()``.

    Yields:
        Read-only mappings from pattern node ids to target node ids.

    """
    config = config or DEFAULT_MATCH_CONFIG
    if len(pattern) == 0:
        yield MappingProxyType({})
        return
    if len(pattern) > len(target) or pattern.edge_count() > target.edge_count():
        logger.debug(
            "Pattern (%d nodes, %d edges) cannot fit target (%d nodes, %d edges)",
            len(pattern),
            pattern.edge_count(),
            len(target),
            target.edge_count(),
        )
        return
    yield from _Matcher(pattern, target, config).run()


def find_subgraph_isomorphism[P: Hashable, Q: Hashable](
    pattern: GMGraph[P],
    target: GMGraph[Q],
    config: MatchConfig | None = None,
) -> Mapping[P, Q] | None:
    """Find the first mapping of ``pattern`` into ``target``.

    Returns:
        A read-only mapping from pattern node ids to target node ids, or None
        when no such mapping exists. An empty pattern always yields the empty
        mapping.

    Example:
        >>> from graphx import DiGraph
        >>> pattern = DiGraph.from_edges([("x", "y")])
        >>> target = DiGraph.from_edges([("a", "b"), ("b", "c"), ("c", "a")])
        >>> dict(find_subgraph_isomorphism(pattern, target))
        {'x': 'a', 'y': 'b'}

    """
    return next(iter_subgraph_isomorphisms(pattern, target, config), None)


def is_isomorphic[P: Hashable, Q: Hashable](
    g1: GMGraph[P],
    g2: GMGraph[Q],
    config: MatchConfig | None = None,
) -> bool:
    """Check whether two graphs are isomorphic.

    Labels are compared with ``config.label_compatible``; the mode is always
    induced.
    """
    if len(g1) != len(g2) or g1.edge_count() != g2.edge_count():
        return False
    config = dataclasses.replace(config or DEFAULT_MATCH_CONFIG, mode=IsomorphismMode.INDUCED, max_mappings=1)
    return find_subgraph_isomorphism(g1, g2, config) is not None
