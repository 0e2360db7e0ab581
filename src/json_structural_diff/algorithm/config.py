"""DiffOptions and ArrayComparisonMode for diff configuration.

DiffOptions is a frozen (immutable) dataclass holding the comparison flags.
ArrayComparisonMode names the two array strategies the flags select between:
ordered (positional) or unordered (content matching).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum, auto


class ArrayComparisonMode(StrEnum):
    """How to compare JSON arrays.

    - ORDERED:   Zip by index; shared indices recurse, tails are added/deleted.
    - UNORDERED: Greedy matching by deep equality; elements are either wholly
                 matched or wholly added/deleted.
    """

    ORDERED = auto()
    UNORDERED = auto()


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Immutable configuration for a structural comparison.

    Every combination of flags is valid.

    Attributes:
        ignore_key_order: Accepted for symmetry with ``ignore_array_order``.
            Object keys are always compared as a set, so this flag has no
            effect on the result.  Default False.
        ignore_array_order: When True, arrays are compared by content matching
            instead of by position.  Default False.
        show_unchanged: When True, equal leaves and unchanged containers are
            emitted as EQUAL records.  Default False.
    """

    ignore_key_order: bool = False
    ignore_array_order: bool = False
    show_unchanged: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                msg = f"{f.name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)

    @property
    def array_mode(self) -> ArrayComparisonMode:
        """The array strategy selected by ``ignore_array_order``."""
        if self.ignore_array_order:
            return ArrayComparisonMode.UNORDERED
        return ArrayComparisonMode.ORDERED
