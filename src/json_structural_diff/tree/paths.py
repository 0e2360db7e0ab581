"""Path construction for diff records.

Paths are immutable strings extended by one segment per recursion frame:

- Root is ``""`` (empty string).
- Object members append ``.key`` (bare ``key`` at the root, no leading dot).
- Array elements append ``[index]`` (``[0]`` at the root).

Keys are inserted verbatim.  A key containing ``.`` or ``[`` therefore yields
an ambiguous path; paths are addresses for humans, not a query language.
"""

from __future__ import annotations

ROOT_PATH = ""


def member_path(parent: str, key: str) -> str:
    """Return the path of object member ``key`` under ``parent``."""
    return f"{parent}.{key}" if parent else key


def index_path(parent: str, index: int) -> str:
    """Return the path of array element ``index`` under ``parent``."""
    return f"{parent}[{index}]"
