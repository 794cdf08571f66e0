"""Tree-model creation, path addressing, and traversal.

Defines ``Node`` and the helpers that build it from JSON or the filesystem.
Paths built here are the identity keys used by all tree state.
"""

from __future__ import annotations

from .build import load_tree_json, node_from_directory, node_from_mapping
from .notes import cached_file_note, clear_note_cache, read_file_note
from .paths import ancestor_paths, join_path, node_path, root_path
from .types import Node, NodeKind, TreeModelError
from .walk import iter_directories, iter_nodes

__all__ = [
    "Node",
    "NodeKind",
    "TreeModelError",
    "join_path",
    "node_path",
    "root_path",
    "ancestor_paths",
    "iter_nodes",
    "iter_directories",
    "node_from_mapping",
    "load_tree_json",
    "node_from_directory",
    "read_file_note",
    "cached_file_note",
    "clear_note_cache",
]
