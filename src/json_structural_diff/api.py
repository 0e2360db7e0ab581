"""Public API functions for json-structural-diff.

This module provides the user-facing functions: compare, compare_json,
compare_json_text, diff_stats, format_as_text and is_identical.  Each
comparison creates a fresh StructuralComparator to guarantee zero global
state between calls.
"""

from __future__ import annotations

import json
from typing import Any

from json_structural_diff.algorithm.config import DiffOptions
from json_structural_diff.comparator import StructuralComparator
from json_structural_diff.formatter import format_as_text
from json_structural_diff.result import DiffResult
from json_structural_diff.stats import diff_stats
from json_structural_diff.tree.nodes import DiffTree

__all__ = [
    "compare",
    "compare_json",
    "compare_json_text",
    "diff_stats",
    "format_as_text",
    "is_identical",
]


def compare(
    old: Any,
    new: Any,
    options: DiffOptions | None = None,
) -> DiffResult:
    """Compare two JSON values and return a rich DiffResult.

    Args:
        old:     Value on the old side (dict, list, str, int, float, bool, None).
        new:     Value on the new side.
        options: Comparison flags. Defaults to ``DiffOptions()`` when None.

    Returns:
        A ``DiffResult`` with nodes, stats and computation_time_ms populated.
    """
    return StructuralComparator(options=options).compare(old, new)


def compare_json(
    old: Any,
    new: Any,
    options: DiffOptions | None = None,
) -> DiffTree:
    """Compare two JSON values and return the diff tree.

    Args:
        old:     Value on the old side.
        new:     Value on the new side.
        options: Comparison flags. Defaults to ``DiffOptions()`` when None.

    Returns:
        List of ``DiffNode`` records; pass it to ``diff_stats`` or
        ``format_as_text``.
    """
    return compare(old, new, options=options).nodes


def compare_json_text(
    old_text: str | bytes,
    new_text: str | bytes,
    options: DiffOptions | None = None,
) -> DiffTree:
    """Parse two JSON documents and return their diff tree.

    Raises:
        json.JSONDecodeError: If either document is not valid JSON.
    """
    return compare_json(json.loads(old_text), json.loads(new_text), options=options)


def is_identical(
    old: Any,
    new: Any,
    options: DiffOptions | None = None,
) -> bool:
    """Return True if the comparison reports no change of any kind.

    With ``ignore_array_order`` set, arrays holding the same elements in a
    different order are identical.
    """
    return not compare(old, new, options=options).has_changes
