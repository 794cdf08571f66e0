"""Public package surface for filetree.

Re-exports the tree model and tree-state API, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .config import TreeViewConfig
from .tree_model import Node, NodeKind, TreeModelError, join_path, node_from_mapping
from .tree_state import (
    FileTreeView,
    TreeRow,
    build_expand_map,
    derive_breadcrumb,
    select_path,
    toggle_all,
    toggle_path,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "Node",
    "NodeKind",
    "TreeModelError",
    "TreeViewConfig",
    "FileTreeView",
    "TreeRow",
    "join_path",
    "node_from_mapping",
    "build_expand_map",
    "toggle_path",
    "toggle_all",
    "select_path",
    "derive_breadcrumb",
]
