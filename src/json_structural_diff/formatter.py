"""Plain-text rendering of a diff tree.

One line per record, indented two spaces per nesting level, prefixed by kind::

    + path: <new>              ADDED
    - path: <old>              DELETED
    ~ path:                    MODIFIED
      - <old>
      + <new>
    ! path: type changed       TYPE_CHANGED
      - <kind>: <old>
      + <kind>: <new>
      path:                    EQUAL container with children
      path: <value>            EQUAL leaf

Values are rendered as compact JSON.  The root path renders as ``root``.
EQUAL leaves only exist in a tree built with ``show_unchanged``, so without
that option unchanged values produce no output.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from json_structural_diff.tree.nodes import DiffKind, DiffNode
from json_structural_diff.tree.values import classify

__all__ = ["format_as_text", "render_value"]

_INDENT = "  "
_ROOT_LABEL = "root"


def _to_builtin(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def render_value(value: Any) -> str:
    """Render a JSON value as compact JSON text (non-ASCII kept as is)."""
    return json.dumps(
        value, ensure_ascii=False, separators=(",", ":"), default=_to_builtin
    )


def _format_node(node: DiffNode, depth: int, lines: list[str]) -> None:
    prefix = _INDENT * depth
    path = node.path or _ROOT_LABEL
    kind = node.kind

    if kind is DiffKind.ADDED:
        lines.append(f"{prefix}+ {path}: {render_value(node.new_value)}")
    elif kind is DiffKind.DELETED:
        lines.append(f"{prefix}- {path}: {render_value(node.old_value)}")
    elif kind is DiffKind.MODIFIED:
        lines.append(f"{prefix}~ {path}:")
        lines.append(f"{prefix}  - {render_value(node.old_value)}")
        lines.append(f"{prefix}  + {render_value(node.new_value)}")
    elif kind is DiffKind.TYPE_CHANGED:
        old_kind = classify(node.old_value)
        new_kind = classify(node.new_value)
        lines.append(f"{prefix}! {path}: type changed")
        lines.append(f"{prefix}  - {old_kind}: {render_value(node.old_value)}")
        lines.append(f"{prefix}  + {new_kind}: {render_value(node.new_value)}")
    elif node.children:
        # EQUAL container: bare header so nested changes stay visible
        lines.append(f"{prefix}  {path}:")
    else:
        lines.append(f"{prefix}  {path}: {render_value(node.new_value)}")

    for child in node.children:
        _format_node(child, depth + 1, lines)


def format_as_text(tree: Iterable[DiffNode]) -> str:
    """Render a diff tree as human-readable lines joined by newlines.

    Args:
        tree: Records returned by a comparison.

    Returns:
        The rendered text; an empty string for an empty tree.
    """
    lines: list[str] = []
    for node in tree:
        _format_node(node, 0, lines)
    return "\n".join(lines)
