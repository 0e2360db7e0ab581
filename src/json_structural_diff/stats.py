"""DiffStats tally and the aggregator that derives it from a diff tree."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from json_structural_diff.tree.nodes import DiffKind, DiffNode, iter_nodes

__all__ = ["DiffStats", "diff_stats"]


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Per-kind record counts for one diff tree.

    Attributes:
        added:         Number of ADDED records.
        deleted:       Number of DELETED records.
        modified:      Number of MODIFIED and TYPE_CHANGED records together.
        unchanged:     Number of EQUAL records, container headers included.
        total_changes: ``added + deleted + modified``.
    """

    added: int = 0
    deleted: int = 0
    modified: int = 0
    unchanged: int = 0
    total_changes: int = 0

    @property
    def total_nodes(self) -> int:
        """Number of records counted; every record lands in exactly one bucket."""
        return self.added + self.deleted + self.modified + self.unchanged


def diff_stats(tree: Iterable[DiffNode]) -> DiffStats:
    """Count the records of a diff tree by kind, descending into children.

    Args:
        tree: Records returned by a comparison.

    Returns:
        A ``DiffStats`` tally.
    """
    counts = Counter(node.kind for node in iter_nodes(tree))
    added = counts[DiffKind.ADDED]
    deleted = counts[DiffKind.DELETED]
    modified = counts[DiffKind.MODIFIED] + counts[DiffKind.TYPE_CHANGED]
    return DiffStats(
        added=added,
        deleted=deleted,
        modified=modified,
        unchanged=counts[DiffKind.EQUAL],
        total_changes=added + deleted + modified,
    )
