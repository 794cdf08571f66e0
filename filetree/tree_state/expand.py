"""Expand-state store: directory path -> expanded flag.

Every transition returns a fresh read-only mapping and leaves its input
untouched, so callers holding an older store keep a consistent value.
The store's key set is always exactly the directory paths of the tree it
was derived from.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..tree_model import Node, ancestor_paths, iter_directories

ExpandState = Mapping[str, bool]

EMPTY_EXPAND_STATE: ExpandState = MappingProxyType({})


def _freeze(values: dict[str, bool]) -> ExpandState:
    return MappingProxyType(values)


def build_expand_map(
    root: Node,
    base_path: str = "",
    default_expand_depth: int = 2,
    expand_all: bool = False,
) -> ExpandState:
    """Derive the initial store for ``root``.

    A directory at depth ``d`` starts expanded when ``expand_all`` is set or
    ``d <= default_expand_depth``. Descendants of collapsed directories still
    get entries so their state survives later ancestor toggles.
    """
    return _freeze(
        {
            path: bool(expand_all) or depth <= default_expand_depth
            for _node, path, depth in iter_directories(root, base_path)
        }
    )


def is_fully_expanded(state: ExpandState) -> bool:
    """Return whether every entry is expanded (vacuously true when empty)."""
    return all(state.values())


def toggle_path(state: ExpandState, path: str) -> ExpandState:
    """Flip one directory entry; unknown paths return ``state`` unchanged."""
    if path not in state:
        return state
    updated = dict(state)
    updated[path] = not updated[path]
    return _freeze(updated)


def set_expanded(state: ExpandState, paths: Iterable[str], value: bool = True) -> ExpandState:
    """Set known ``paths`` to ``value``; unknown paths are ignored."""
    changes = {path: bool(value) for path in paths if path in state and state[path] != bool(value)}
    if not changes:
        return state
    return _freeze({**state, **changes})


def expand_path_ancestors(state: ExpandState, path: str) -> ExpandState:
    """Expand every known ancestor directory of ``path`` so its row is visible."""
    return set_expanded(state, ancestor_paths(path), True)


def toggle_all(
    state: ExpandState,
    root: Node,
    base_path: str = "",
    default_expand_depth: int = 2,
) -> ExpandState:
    """Switch between fully expanded and collapsed-to-default-depth.

    The decision is re-derived from ``state`` on every call: a fully expanded
    store collapses to the default depth, anything else expands everything.
    Hand-built partial configurations are not remembered.
    """
    if is_fully_expanded(state):
        return build_expand_map(root, base_path, default_expand_depth, expand_all=False)
    return build_expand_map(root, base_path, default_expand_depth, expand_all=True)


__all__ = [
    "ExpandState",
    "EMPTY_EXPAND_STATE",
    "build_expand_map",
    "is_fully_expanded",
    "toggle_path",
    "set_expanded",
    "expand_path_ancestors",
    "toggle_all",
]
