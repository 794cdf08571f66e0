"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows, the header, and the breadcrumb.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    tree_branch: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_note: str
    header_label: str
    header_path: str
    breadcrumb_segment: str
    breadcrumb_separator: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    tree_branch="\033[38;5;247m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[1;38;5;252m",
    tree_note="\033[38;5;244m",
    header_label="\033[38;5;244m",
    header_path="\033[1m",
    breadcrumb_segment="\033[1;38;5;252m",
    breadcrumb_separator="\033[38;5;247m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    tree_branch="\033[2;38;5;31m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;153m",
    tree_note="\033[38;5;73m",
    header_label="\033[38;5;110m",
    header_path="\033[1;38;5;45m",
    breadcrumb_segment="\033[1;38;5;117m",
    breadcrumb_separator="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    tree_branch="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_note="",
    header_label="",
    header_path="",
    breadcrumb_segment="",
    breadcrumb_separator="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
