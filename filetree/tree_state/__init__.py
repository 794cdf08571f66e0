"""Expand, selection, and row state for a tree view."""

from __future__ import annotations

from .expand import (
    EMPTY_EXPAND_STATE,
    ExpandState,
    build_expand_map,
    expand_path_ancestors,
    is_fully_expanded,
    set_expanded,
    toggle_all,
    toggle_path,
)
from .rows import TreeRow, visible_rows
from .selection import derive_breadcrumb, select_path
from .view import FileTreeView

__all__ = [
    "ExpandState",
    "EMPTY_EXPAND_STATE",
    "build_expand_map",
    "is_fully_expanded",
    "toggle_path",
    "set_expanded",
    "expand_path_ancestors",
    "toggle_all",
    "select_path",
    "derive_breadcrumb",
    "TreeRow",
    "visible_rows",
    "FileTreeView",
]
