"""Visible-row projection handed to row presentation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..tree_model import Node, NodeKind, node_path
from .expand import ExpandState


@dataclass(frozen=True)
class TreeRow:
    """One visible node with the state a renderer needs to draw it."""

    path: str
    name: str
    kind: NodeKind
    depth: int
    is_expanded: bool | None
    is_selected: bool
    note: str | None = None
    is_last: bool = True
    ancestor_last_flags: tuple[bool, ...] = ()

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def has_note(self) -> bool:
        return bool(self.note)


def visible_rows(
    root: Node,
    base_path: str,
    expanded: ExpandState,
    selected: str,
) -> Iterator[TreeRow]:
    """Yield rows in pre-order, descending only into expanded directories.

    A directory path absent from ``expanded`` is drawn collapsed.
    """
    stack: list[tuple[Node, str, int, bool, tuple[bool, ...]]] = [(root, base_path, 0, True, ())]
    while stack:
        node, parent_path, depth, is_last, ancestor_flags = stack.pop()
        path = node_path(parent_path, node)
        is_open = expanded.get(path, False) if node.is_dir else None
        yield TreeRow(
            path=path,
            name=node.name,
            kind=node.kind,
            depth=depth,
            is_expanded=is_open,
            is_selected=path == selected,
            note=node.note,
            is_last=is_last,
            ancestor_last_flags=ancestor_flags,
        )
        if not (node.is_dir and is_open and node.children):
            continue
        child_flags = ancestor_flags + (is_last,)
        last_idx = len(node.children) - 1
        for idx in range(last_idx, -1, -1):
            stack.append((node.children[idx], path, depth + 1, idx == last_idx, child_flags))


__all__ = ["TreeRow", "visible_rows"]
