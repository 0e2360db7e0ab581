"""StructuralDiffer: recursive type-aware comparison of two JSON values.

Walks both values in lock-step and emits one ``DiffNode`` per path whose
old/new pairing is reported.

Architecture:
- Absent (None) values: both absent → EQUAL (only when ``show_unchanged``);
  one absent → ADDED / DELETED carrying the whole value, never expanded.
- Variant mismatch:   TYPE_CHANGED, no recursion.
- Primitive pair:     value equality → EQUAL (optional) or MODIFIED.
- OBJECT pair:        key union in old-then-new insertion order; one-sided keys
                      are ADDED / DELETED, shared keys always recurse.
- ARRAY pair:         delegated to the array reconciler.

Container pairs below the root become an EQUAL header record that owns the
member records as ``children``.  The header is emitted when it has children
or when ``show_unchanged`` is set.  At the root the member records are
returned directly: the returned list is the children of an implicit root.

Every call builds fresh records; no state survives between ``compute`` calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_structural_diff.algorithm.arrays import reconcile
from json_structural_diff.algorithm.config import DiffOptions
from json_structural_diff.tree.nodes import DiffKind, DiffNode, DiffTree
from json_structural_diff.tree.paths import ROOT_PATH, member_path
from json_structural_diff.tree.values import ValueKind, classify


class StructuralDiffer:
    """Recursive structural diff for JSON values.

    Example::

        from json_structural_diff.algorithm.differ import StructuralDiffer

        differ = StructuralDiffer()
        tree = differ.compute({"a": 1, "b": 2}, {"a": 1, "b": 3})
        # [DiffNode(path='b', kind=<DiffKind.MODIFIED: 'modified'>, ...)]
    """

    def __init__(self, options: DiffOptions | None = None) -> None:
        self._options = options if options is not None else DiffOptions()

    @property
    def options(self) -> DiffOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, old: Any, new: Any) -> DiffTree:
        """Compare two JSON values and return the diff tree.

        Args:
            old: Value on the old side (dict, list, str, int, float, bool, None).
            new: Value on the new side.

        Returns:
            The records of the implicit root, in emission order.

        Raises:
            TypeError: If either input contains a non-JSON value.
        """
        return self._compare_at(ROOT_PATH, old, new, root=True)

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _compare_at(
        self, path: str, old: Any, new: Any, root: bool = False
    ) -> list[DiffNode]:
        """Return the records for one old/new pairing at ``path``."""
        show_unchanged = self._options.show_unchanged

        if old is None and new is None:
            if show_unchanged:
                return [DiffNode(path, DiffKind.EQUAL, old, new)]
            return []

        if old is None:
            return [DiffNode(path, DiffKind.ADDED, new_value=new)]

        if new is None:
            return [DiffNode(path, DiffKind.DELETED, old_value=old)]

        kind = classify(old)
        if kind is not classify(new):
            return [DiffNode(path, DiffKind.TYPE_CHANGED, old, new)]

        if not kind.is_container:
            if old != new:
                return [DiffNode(path, DiffKind.MODIFIED, old, new)]
            if show_unchanged:
                return [DiffNode(path, DiffKind.EQUAL, old, new)]
            return []

        if kind is ValueKind.OBJECT:
            children = self._compare_objects(path, old, new)
        else:
            children = reconcile(old, new, path, self._options, self._compare_at)

        if root:
            return children
        if children or show_unchanged:
            return [DiffNode(path, DiffKind.EQUAL, old, new, tuple(children))]
        return []

    def _compare_objects(
        self, path: str, old: Mapping[str, Any], new: Mapping[str, Any]
    ) -> list[DiffNode]:
        """Return member records for an object pair.

        Keys are visited once each: old keys in insertion order, then keys
        only the new side has, in its insertion order.
        """
        records: list[DiffNode] = []
        # dict preserves insertion order and de-duplicates
        keys = dict.fromkeys([*old.keys(), *new.keys()])

        for key in keys:
            key_path = member_path(path, key)
            if key not in old:
                records.append(DiffNode(key_path, DiffKind.ADDED, new_value=new[key]))
            elif key not in new:
                records.append(
                    DiffNode(key_path, DiffKind.DELETED, old_value=old[key])
                )
            else:
                records.extend(self._compare_at(key_path, old[key], new[key]))

        return records
