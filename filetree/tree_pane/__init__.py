"""Tree-pane rendering of a ``FileTreeView``."""

from __future__ import annotations

from .rendering import (
    format_tree_row,
    render_breadcrumb,
    render_header,
    render_rows,
    render_tree_view,
    tree_row_prefix,
)

__all__ = [
    "tree_row_prefix",
    "format_tree_row",
    "render_breadcrumb",
    "render_header",
    "render_rows",
    "render_tree_view",
]
