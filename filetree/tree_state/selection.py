"""Selection value and breadcrumb derivation."""

from __future__ import annotations


def select_path(path: str | None) -> str:
    """Return the new selection; any path is accepted as-is."""
    return "" if path is None else str(path)


def derive_breadcrumb(selection: str) -> tuple[str, ...]:
    """Split ``selection`` into name segments after one leading slash.

    An empty selection yields no segments rather than ``("",)``.
    """
    trimmed = selection[1:] if selection.startswith("/") else selection
    if not trimmed:
        return ()
    return tuple(trimmed.split("/"))


__all__ = ["select_path", "derive_breadcrumb"]
