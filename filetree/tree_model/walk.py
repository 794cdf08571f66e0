"""Depth-first pre-order traversal over tree nodes with an explicit stack."""

from __future__ import annotations

from collections.abc import Iterator

from .paths import node_path
from .types import Node


def iter_nodes(root: Node, base_path: str = "") -> Iterator[tuple[Node, str, int]]:
    """Yield ``(node, path, depth)`` for every node in pre-order.

    The root is depth 0. Children are visited in their given order.
    """
    stack: list[tuple[Node, str, int]] = [(root, base_path, 0)]
    while stack:
        node, parent_path, depth = stack.pop()
        path = node_path(parent_path, node)
        yield node, path, depth
        if not node.is_dir:
            continue
        for child in reversed(node.children or ()):
            stack.append((child, path, depth + 1))


def iter_directories(root: Node, base_path: str = "") -> Iterator[tuple[Node, str, int]]:
    """Yield only directory nodes from ``iter_nodes``."""
    for node, path, depth in iter_nodes(root, base_path):
        if node.is_dir:
            yield node, path, depth
