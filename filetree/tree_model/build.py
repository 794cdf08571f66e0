"""Tree-model construction from JSON-like data or a real directory."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from .notes import cached_file_note
from .types import Node, NodeKind, TreeModelError

_KIND_ALIASES = {
    "file": NodeKind.FILE,
    "dir": NodeKind.DIRECTORY,
    "directory": NodeKind.DIRECTORY,
}


def _parse_kind(raw: object, where: str) -> NodeKind:
    if isinstance(raw, NodeKind):
        return raw
    kind = _KIND_ALIASES.get(str(raw).strip().lower()) if isinstance(raw, str) else None
    if kind is None:
        raise TreeModelError(f"{where}: unknown node kind {raw!r}")
    return kind


def node_from_mapping(data: Mapping[str, object], where: str = "root") -> Node:
    """Convert one JSON-like mapping (and its children) into a ``Node``.

    Missing or ``null`` children on a directory mean an empty folder. Children
    given on a file are dropped. A missing name becomes ``""``.
    """
    if not isinstance(data, Mapping):
        raise TreeModelError(f"{where}: expected an object, got {type(data).__name__}")

    kind = _parse_kind(data.get("kind"), where)
    raw_name = data.get("name")
    name = "" if raw_name is None else str(raw_name)
    raw_note = data.get("note")
    note = str(raw_note) if raw_note else None
    if kind is NodeKind.FILE:
        return Node.file(name, note=note)

    raw_children = data.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, (list, tuple)):
        raise TreeModelError(f"{where}: children must be a list")
    children = [
        node_from_mapping(child, where=f"{where}/{name or '?'}[{idx}]")
        for idx, child in enumerate(raw_children)
    ]
    return Node.directory(name, children, note=note)


def load_tree_json(path: Path) -> Node:
    """Read a JSON tree document from ``path``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise TreeModelError(f"cannot read tree from {path}: {exc}") from exc
    return node_from_mapping(data)


def node_from_directory(
    root: Path,
    show_hidden: bool = False,
    max_depth: int | None = None,
    include_notes: bool = False,
) -> Node:
    """Scan ``root`` into a directory ``Node``.

    Directories sort before files, names compare case-insensitively, symlinks
    are not followed, and unreadable directories become empty folders.
    Directories deeper than ``max_depth`` are kept without children.
    """
    root = Path(root)

    def scan(directory: Path, depth: int) -> Node:
        if max_depth is not None and depth >= max_depth:
            return Node.directory(directory.name)
        entries: list[tuple[str, bool, Path]] = []
        try:
            with os.scandir(directory) as scanned:
                for child in scanned:
                    if not show_hidden and child.name.startswith("."):
                        continue
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    entries.append((child.name, is_dir, Path(child.path)))
        except OSError:
            return Node.directory(directory.name)

        entries.sort(key=lambda item: (not item[1], item[0].lower()))
        children: list[Node] = []
        for name, is_dir, child_path in entries:
            if is_dir:
                children.append(scan(child_path, depth + 1))
            else:
                note = cached_file_note(child_path) if include_notes else None
                children.append(Node.file(name, note=note))
        return Node.directory(directory.name, children)

    resolved = root.resolve()
    if not resolved.is_dir():
        note = cached_file_note(resolved) if include_notes else None
        return Node.file(resolved.name, note=note)
    node = scan(resolved, 0)
    # Filesystem roots have no name; fall back to the full path text.
    if not node.name:
        return Node.directory(str(resolved), node.children)
    return node
