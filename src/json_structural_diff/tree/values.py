"""ValueKind StrEnum and the classifier that maps JSON values onto it.

Both diff inputs are plain Python values as produced by ``json.loads``
(``dict``, ``list``, ``str``, ``int``, ``float``, ``bool``, ``None``).  The
classifier tags each value with one of six variants before comparison.

Arrays and objects are recognised by capability rather than concrete type:
any ``Mapping`` is an object and any non-string ``Sequence`` is an array, so
tuples and read-only mapping proxies compare like their JSON counterparts.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum, auto
from typing import Any

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six variants of the JSON value model.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"   : int and float alike (1 == 1.0)
    - STRING  -> "string"
    - ARRAY   -> "array"    : any non-string Sequence
    - OBJECT  -> "object"   : any Mapping
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def classify(value: Any) -> ValueKind:
    """Return the variant tag of a JSON value.

    Args:
        value: Any valid JSON value.

    Returns:
        The matching ``ValueKind``.

    Raises:
        TypeError: If value is not a member of the JSON value model.
    """
    if value is None:
        return ValueKind.NULL

    # CRITICAL: bool MUST be checked before int — bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, Mapping):
        return ValueKind.OBJECT

    # str is itself a Sequence; it was handled above
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
