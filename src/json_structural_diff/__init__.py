"""Structural diff - typed change records for JSON documents."""

from __future__ import annotations

import logging

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffOptions
from json_structural_diff.api import (
    compare,
    compare_json,
    compare_json_text,
    diff_stats,
    format_as_text,
    is_identical,
)
from json_structural_diff.comparator import StructuralComparator
from json_structural_diff.result import DiffResult
from json_structural_diff.stats import DiffStats
from json_structural_diff.tree.nodes import DiffKind, DiffNode, DiffTree, iter_nodes
from json_structural_diff.tree.values import ValueKind, classify

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayComparisonMode",
    "DiffKind",
    "DiffNode",
    "DiffOptions",
    "DiffResult",
    "DiffStats",
    "DiffTree",
    "StructuralComparator",
    "ValueKind",
    "classify",
    "compare",
    "compare_json",
    "compare_json_text",
    "diff_stats",
    "format_as_text",
    "is_identical",
    "iter_nodes",
]
