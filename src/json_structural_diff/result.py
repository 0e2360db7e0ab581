"""DiffResult dataclass for structural comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_structural_diff.formatter import format_as_text
from json_structural_diff.stats import DiffStats
from json_structural_diff.tree.nodes import DiffNode

__all__ = ["DiffResult"]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Rich result of a compare() call.

    Attributes:
        nodes: The diff tree: records of the implicit root in emission order.
        stats: Per-kind record counts derived from ``nodes``.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    nodes: list[DiffNode]
    stats: DiffStats
    computation_time_ms: float

    @property
    def has_changes(self) -> bool:
        """True when the tree holds any record other than EQUAL."""
        return self.stats.total_changes > 0

    def to_text(self) -> str:
        """Render ``nodes`` with ``format_as_text``."""
        return format_as_text(self.nodes)
