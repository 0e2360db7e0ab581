"""Tree subpackage for the diff value model and change records.

Re-exports the public API for the tree module:
- ValueKind / classify: the six JSON variants and the classifier
- DiffKind / DiffNode: change record kinds and the record dataclass
- iter_nodes: pre-order flat view of a diff tree
- member_path / index_path: path segment builders
"""

from json_structural_diff.tree.nodes import DiffKind, DiffNode, DiffTree, iter_nodes
from json_structural_diff.tree.paths import ROOT_PATH, index_path, member_path
from json_structural_diff.tree.values import JsonValue, ValueKind, classify

__all__ = [
    "ROOT_PATH",
    "DiffKind",
    "DiffNode",
    "DiffTree",
    "JsonValue",
    "ValueKind",
    "classify",
    "index_path",
    "iter_nodes",
    "member_path",
]
