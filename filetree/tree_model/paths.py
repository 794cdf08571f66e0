"""Canonical slash-joined path identifiers for tree nodes.

Paths are the only identity key for expand and selection state: the tree
model carries no node ids, so a node is addressed by its full name chain.
"""

from __future__ import annotations

from .types import Node


def join_path(*segments: str | None) -> str:
    """Join non-empty segments with ``/`` after stripping outer slashes.

    Falsy segments are dropped before stripping, so ``join_path("", "x")`` is
    ``"x"``. A segment that is only slashes strips down to ``""`` and still
    takes part in the join.
    """
    cleaned = [segment.strip("/") for segment in segments if segment]
    return "/".join(cleaned)


def node_path(parent_path: str, node: Node) -> str:
    """Return the path of ``node`` placed under ``parent_path``."""
    return join_path(parent_path, node.name)


def root_path(root: Node, base_path: str = "") -> str:
    """Return the path of the tree root, which is also the initial selection."""
    return node_path(base_path, root)


def ancestor_paths(path: str) -> list[str]:
    """Return every proper prefix path of ``path``, outermost first."""
    segments = path.split("/") if path else []
    return ["/".join(segments[:idx]) for idx in range(1, len(segments))]
