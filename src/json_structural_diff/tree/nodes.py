"""DiffNode dataclass and DiffKind StrEnum for change records.

A diff tree is a list of ``DiffNode`` records.  Records for object members and
array elements that both sides hold as containers of the same variant own the
records of their own members as ``children``; everything else is a leaf.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = ["DiffKind", "DiffNode", "DiffTree", "iter_nodes"]


class DiffKind(StrEnum):
    """The five outcomes of pairing an old and a new value at one path.

    - ADDED        -> "added"        : only the new side holds a value
    - DELETED      -> "deleted"      : only the old side holds a value
    - MODIFIED     -> "modified"     : same primitive variant, different value
    - TYPE_CHANGED -> "type-changed" : both present, different variants
    - EQUAL        -> "equal"        : unchanged leaf, or a container header
    """

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    TYPE_CHANGED = "type-changed"
    EQUAL = "equal"


@dataclass(frozen=True, slots=True)
class DiffNode:
    """One change record.

    Attributes:
        path:      Location of the value, e.g. ``"address.city"`` or
                   ``"items[2]"``.  The root is ``""``.
        kind:      Which outcome the old/new pairing produced.
        old_value: Value on the old side.  Meaningless (None) for ADDED.
        new_value: Value on the new side.  Meaningless (None) for DELETED.
        children:  Records for the members of a container pair.  Non-empty
                   only when both sides are containers of the same variant.
    """

    path: str
    kind: DiffKind
    old_value: Any = None
    new_value: Any = None
    children: tuple[DiffNode, ...] = ()

    @property
    def is_change(self) -> bool:
        """True for every kind except EQUAL."""
        return self.kind is not DiffKind.EQUAL

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict rendering suitable for ``json.dumps``.

        Absent payloads are omitted: ADDED records carry no ``oldValue``,
        DELETED records carry no ``newValue``, leaves carry no ``children``.
        """
        out: dict[str, Any] = {"path": self.path, "type": str(self.kind)}
        if self.kind is not DiffKind.ADDED:
            out["oldValue"] = self.old_value
        if self.kind is not DiffKind.DELETED:
            out["newValue"] = self.new_value
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


# The top-level result of a comparison: the children of an implicit root.
DiffTree = list[DiffNode]


def iter_nodes(nodes: Iterable[DiffNode]) -> Iterator[DiffNode]:
    """Yield every record of a diff tree in pre-order.

    This is the flat change-log view of the tree: each record appears exactly
    once, a container header before its members.
    """
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)
