"""Deep structural equality between two JSON values.

Used by the unordered array strategy to pair elements.  Numbers compare by
value (``1 == 1.0``), booleans never equal numbers, object key order is
irrelevant and array element order is significant.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.tree.values import ValueKind, classify


def deep_equal(left: Any, right: Any) -> bool:
    """Return True if two JSON values are structurally identical.

    Args:
        left:  First JSON value.
        right: Second JSON value.

    Returns:
        True when both values share a variant and every member, element or
        primitive payload is equal.
    """
    kind = classify(left)
    if kind is not classify(right):
        return False

    if kind is ValueKind.OBJECT:
        if len(left) != len(right):
            return False
        return all(
            key in right and deep_equal(val, right[key]) for key, val in left.items()
        )

    if kind is ValueKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right, strict=True))

    return bool(left == right)
