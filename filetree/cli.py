"""Command-line front door for filetree.

Builds a tree from a JSON document or a scanned directory, applies the
requested select/toggle intents in order, and prints the rendered view.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .clipboard import copy_text_to_clipboard
from .config import load_theme_name, load_view_config, save_theme_name, save_view_defaults
from .tree_model import TreeModelError, load_tree_json, node_from_directory
from .tree_pane import render_tree_view
from .tree_state import FileTreeView
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a collapsible file tree with breadcrumb and selection."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument("--json", dest="json_path", metavar="FILE", help="Read the tree from a JSON document instead.")
    parser.add_argument("--base-path", default=None, help="Prefix prepended to the root name in every path.")
    parser.add_argument("--depth", type=_nonnegative_int, default=None, help="Default expand depth (root is 0).")
    parser.add_argument(
        "--expand-all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Start with every directory expanded (--no-expand-all overrides a saved default).",
    )
    parser.add_argument("--max-width", type=_positive_int, default=None, help="Truncate rendered rows to N columns.")
    parser.add_argument("--select", metavar="PATH", default=None, help="Select PATH and reveal its row.")
    parser.add_argument(
        "--toggle", metavar="PATH", action="append", default=[], help="Toggle directory PATH (repeatable)."
    )
    parser.add_argument(
        "--toggle-all", action="count", default=0, help="Apply toggle-all once per occurrence."
    )
    parser.add_argument("--show-hidden", action="store_true", help="Include dotfiles when scanning.")
    parser.add_argument("--notes", action="store_true", help="Annotate scanned files with their top doc line.")
    parser.add_argument("--scan-depth", type=_positive_int, default=None, help="Stop scanning below this depth.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--copy-selected", action="store_true", help="Copy the selected path to the clipboard.")
    parser.add_argument(
        "--save-defaults", action="store_true", help="Persist --depth, --expand-all, and --theme as defaults."
    )
    parser.add_argument("--debug", action="store_true", help="Log debug diagnostics to stderr.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments, build the view, and print it.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is scanned.
    """
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.json_path is not None and args.path is not None:
        raise SystemExit("Cannot combine positional path with --json.")

    if args.json_path is not None:
        try:
            root = load_tree_json(Path(args.json_path))
        except TreeModelError as exc:
            raise SystemExit(str(exc)) from exc
    else:
        path = Path(args.path or default_path or Path.cwd())
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        root = node_from_directory(
            path,
            show_hidden=args.show_hidden,
            max_depth=args.scan_depth,
            include_notes=args.notes,
        )

    config = load_view_config().with_overrides(
        base_path=args.base_path,
        default_expand_depth=args.depth,
        expand_all=args.expand_all,
        max_width=args.max_width,
    )
    if args.save_defaults:
        save_view_defaults(config)
        if args.theme:
            save_theme_name(args.theme)

    view = FileTreeView(
        root,
        config,
        copy_text=lambda text: copy_text_to_clipboard(text, stream=sys.stderr),
    )
    if args.select is not None:
        view.handle_row_click(args.select)
        view.reveal(args.select)
    for target in args.toggle:
        view.handle_toggle_click(target)
    for _ in range(args.toggle_all):
        view.toggle_all()

    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    sys.stdout.write(render_tree_view(view, theme))

    if args.copy_selected:
        view.copy_selected()


if __name__ == "__main__":
    main()
