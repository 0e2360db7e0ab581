"""algorithm subpackage — public API for the structural diff algorithm.

Provides the recursive differ, its configuration, the array reconciler and
the deep-equality oracle.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_structural_diff.algorithm import DiffOptions, StructuralDiffer

    differ = StructuralDiffer(DiffOptions(ignore_array_order=True))
    tree = differ.compute([1, 2], [2, 1])
    # tree == []  (same elements, different order)
"""

from __future__ import annotations

from json_structural_diff.algorithm.arrays import (
    reconcile,
    reconcile_ordered,
    reconcile_unordered,
)
from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffOptions
from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.algorithm.equality import deep_equal

__all__ = [
    "ArrayComparisonMode",
    "DiffOptions",
    "StructuralDiffer",
    "deep_equal",
    "reconcile",
    "reconcile_ordered",
    "reconcile_unordered",
]
