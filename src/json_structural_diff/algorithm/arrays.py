"""Array reconciler: ordered and unordered strategies for array pairs.

Both strategies return the records for the *elements* of an array pair; the
caller decides whether to wrap them in a container header.

Ordered strategy:
    Zip by index up to ``max(len(old), len(new))``.  Indices past the end of
    one side become ADDED / DELETED; shared indices recurse via the caller's
    ``recurse`` callback.  Inserting at the front reports every later element
    as modified — positional comparison is insertion-sensitive.

Unordered strategy:
    Greedy matching by deep equality in old-array order.  Each old element
    consumes the first unconsumed deep-equal new element (EQUAL at the old
    index when ``show_unchanged``) or is DELETED at its old index.  Every new
    element left unconsumed is ADDED at its *new* index.  An ADDED and a
    DELETED record can therefore share a path while referring to different
    arrays.  No MODIFIED record is ever produced.  Worst case O(n·m) deep
    comparisons.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from json_structural_diff.algorithm.config import ArrayComparisonMode, DiffOptions
from json_structural_diff.algorithm.equality import deep_equal
from json_structural_diff.tree.nodes import DiffKind, DiffNode
from json_structural_diff.tree.paths import index_path

# recurse(path, old_value, new_value) -> records at that path
Recurse = Callable[[str, Any, Any], list[DiffNode]]


def reconcile_ordered(
    old: Sequence[Any],
    new: Sequence[Any],
    path: str,
    recurse: Recurse,
) -> list[DiffNode]:
    """Compare two arrays position by position.

    Args:
        old:     Array on the old side.
        new:     Array on the new side.
        path:    Path of the array pair.
        recurse: Comparator callback applied to each shared index.

    Returns:
        Element records in index order.
    """
    records: list[DiffNode] = []
    for i in range(max(len(old), len(new))):
        elem_path = index_path(path, i)
        if i >= len(old):
            records.append(DiffNode(elem_path, DiffKind.ADDED, new_value=new[i]))
        elif i >= len(new):
            records.append(DiffNode(elem_path, DiffKind.DELETED, old_value=old[i]))
        else:
            records.extend(recurse(elem_path, old[i], new[i]))
    return records


def reconcile_unordered(
    old: Sequence[Any],
    new: Sequence[Any],
    path: str,
    show_unchanged: bool,
) -> list[DiffNode]:
    """Compare two arrays as multisets via greedy deep-equality matching.

    Args:
        old:            Array on the old side.
        new:            Array on the new side.
        path:           Path of the array pair.
        show_unchanged: Emit EQUAL records for matched elements.

    Returns:
        Records for the old array in index order (DELETED / EQUAL), followed
        by ADDED records for unmatched new elements in index order.
    """
    records: list[DiffNode] = []
    consumed: set[int] = set()

    for old_idx, item in enumerate(old):
        match_idx = next(
            (
                new_idx
                for new_idx, candidate in enumerate(new)
                if new_idx not in consumed and deep_equal(item, candidate)
            ),
            None,
        )
        elem_path = index_path(path, old_idx)
        if match_idx is None:
            records.append(DiffNode(elem_path, DiffKind.DELETED, old_value=item))
            continue
        consumed.add(match_idx)
        if show_unchanged:
            records.append(
                DiffNode(elem_path, DiffKind.EQUAL, item, new[match_idx])
            )

    for new_idx, item in enumerate(new):
        if new_idx not in consumed:
            records.append(
                DiffNode(index_path(path, new_idx), DiffKind.ADDED, new_value=item)
            )

    return records


def reconcile(
    old: Sequence[Any],
    new: Sequence[Any],
    path: str,
    options: DiffOptions,
    recurse: Recurse,
) -> list[DiffNode]:
    """Dispatch an array pair to the strategy selected by ``options``."""
    if options.array_mode is ArrayComparisonMode.UNORDERED:
        return reconcile_unordered(old, new, path, options.show_unchanged)
    return reconcile_ordered(old, new, path, recurse)
