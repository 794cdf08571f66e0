"""Text rendering for tree rows, the selection header, and the breadcrumb."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..ansi import truncate_ansi_line
from ..tree_state import FileTreeView, TreeRow
from ..ui_theme import DEFAULT_THEME, UITheme

BRANCH_MID = "├─ "
BRANCH_LAST = "└─ "
GUIDE_OPEN = "│  "
GUIDE_DONE = "   "
MARKER_OPEN = "▾ "
MARKER_CLOSED = "▸ "
MARKER_FILE = "  "
SELECTED_GUTTER = "> "
GUTTER = "  "
EMPTY_BREADCRUMB = "—"


def tree_row_prefix(row: TreeRow) -> str:
    """Return the guide lines and branch glyph drawn before a row's marker."""
    guides = "".join(GUIDE_DONE if last else GUIDE_OPEN for last in row.ancestor_last_flags)
    if row.depth == 0:
        return guides
    return guides + (BRANCH_LAST if row.is_last else BRANCH_MID)


def format_tree_row(row: TreeRow, theme: UITheme | None = None, max_width: int | None = None) -> str:
    """Render one row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if row.is_dir:
        marker = MARKER_OPEN if row.is_expanded else MARKER_CLOSED
        name = f"{active_theme.tree_dir}{row.name}/{reset}"
    else:
        marker = MARKER_FILE
        name = f"{active_theme.tree_file}{row.name}{reset}"
    note = f"  {active_theme.tree_note}{row.note}{reset}" if row.has_note else ""
    gutter = SELECTED_GUTTER if row.is_selected else GUTTER

    text = (
        f"{gutter}{active_theme.tree_branch}{tree_row_prefix(row)}{reset}"
        f"{active_theme.tree_marker}{marker}{reset}{name}{note}"
    )
    if max_width is not None:
        text = truncate_ansi_line(text, max_width, reset)
    if row.is_selected and active_theme.reverse:
        # Inner resets would end reverse video early, so re-apply it after each.
        text = active_theme.reverse + text.replace(reset, reset + active_theme.reverse) + reset
    return text


def render_breadcrumb(segments: Sequence[str], theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if not segments:
        return EMPTY_BREADCRUMB
    separator = f" {active_theme.breadcrumb_separator}/{reset} "
    return separator.join(f"{active_theme.breadcrumb_segment}{segment}{reset}" for segment in segments)


def render_header(selected: str, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    return f"{active_theme.header_label}Selected:{reset} {active_theme.header_path}{selected}{reset}"


def render_rows(rows: Iterable[TreeRow], theme: UITheme | None = None, max_width: int | None = None) -> list[str]:
    return [format_tree_row(row, theme, max_width) for row in rows]


def render_tree_view(view: FileTreeView, theme: UITheme | None = None) -> str:
    """Render header, breadcrumb, and visible rows of ``view`` as one string."""
    max_width = view.config.max_width
    lines = [render_header(view.selected, theme), render_breadcrumb(view.breadcrumb, theme), ""]
    if max_width is not None:
        lines = [truncate_ansi_line(line, max_width, (theme or DEFAULT_THEME).reset) for line in lines]
    lines.extend(render_rows(view.rows(), theme, max_width))
    return "\n".join(lines) + "\n"


__all__ = [
    "tree_row_prefix",
    "format_tree_row",
    "render_breadcrumb",
    "render_header",
    "render_rows",
    "render_tree_view",
]
