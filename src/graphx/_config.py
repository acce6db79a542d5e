"""Options controlling the subgraph isomorphism search."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ._errors import ConfigError


class IsomorphismMode(StrEnum):
    """Which edges between mapped nodes must agree."""

    # pattern edge <=> target edge, for every pair of mapped nodes
    INDUCED = "induced"
    # pattern edge => target edge; the target may have extra edges
    MONOMORPHISM = "monomorphism"


def labels_equal(pattern_label: Any, target_label: Any) -> bool:
    """Default label compatibility: exact equality (two missing labels match)."""
    return bool(pattern_label == target_label)


@dataclass(slots=True, frozen=True)
class MatchConfig:
    """Configuration of a subgraph isomorphism search.

    Attributes:
        mode: Edge agreement rule, see ``IsomorphismMode``. Plain strings are
            accepted and converted.
        label_compatible: Predicate called as ``(pattern_label, target_label)``
            deciding whether a pattern node may map onto a target node.
        max_mappings: Upper bound on the number of mappings the exhaustive
            enumeration yields. None means no bound.

    """

    mode: IsomorphismMode = IsomorphismMode.INDUCED
    label_compatible: Callable[[Any, Any], bool] = labels_equal
    max_mappings: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.mode, IsomorphismMode):
            try:
                mode = IsomorphismMode(self.mode)
            except ValueError as e:
                choices = ", ".join(m.value for m in IsomorphismMode)
                msg = f"Invalid isomorphism mode '{self.mode}'. Expected one of: {choices}"
                raise ConfigError(msg) from e
            object.__setattr__(self, "mode", mode)

        if not callable(self.label_compatible):
            msg = "Invalid label_compatible: expected a callable taking (pattern_label, target_label)"
            raise ConfigError(msg)

        if self.max_mappings is not None and (
            isinstance(self.max_mappings, bool) or not isinstance(self.max_mappings, int) or self.max_mappings < 1
        ):
            msg = f"Invalid max_mappings {self.max_mappings!r}: expected a positive integer or None"
            raise ConfigError(msg)

    @property
    def induced(self) -> bool:
        return self.mode is IsomorphismMode.INDUCED


DEFAULT_MATCH_CONFIG = MatchConfig()
