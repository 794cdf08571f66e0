"""Tree-view controller owning one widget instance's expand and selection state.

Row presentation reports intents (row click, toggle click, copy click) to
``FileTreeView``; each handler runs synchronously and replaces the store or
selection wholesale. Clipboard writes go through an injectable collaborator
and are never awaited.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import TreeViewConfig
from ..tree_model import Node, root_path
from .expand import ExpandState, build_expand_map, expand_path_ancestors, toggle_all, toggle_path
from .rows import TreeRow, visible_rows
from .selection import derive_breadcrumb, select_path

logger = logging.getLogger(__name__)


def _default_copy_text(text: str) -> None:
    from ..clipboard import copy_text_async

    copy_text_async(text)


class FileTreeView:
    """Expand state, selection, and breadcrumb for one tree.

    State is derived from ``root`` and ``config`` at construction and again
    whenever either is replaced; otherwise it changes only through the
    intent handlers below.
    """

    def __init__(
        self,
        root: Node,
        config: TreeViewConfig | None = None,
        *,
        copy_text: Callable[[str], object] | None = None,
    ) -> None:
        self._root = root
        self._config = config or TreeViewConfig()
        self._copy_text = copy_text or _default_copy_text
        self._expanded: ExpandState = {}
        self._selected = ""
        self._rederive()

    def _rederive(self) -> None:
        config = self._config
        self._expanded = build_expand_map(
            self._root, config.base_path, config.default_expand_depth, config.expand_all
        )
        self._selected = root_path(self._root, config.base_path)

    @property
    def root(self) -> Node:
        return self._root

    @property
    def config(self) -> TreeViewConfig:
        return self._config

    @property
    def root_path(self) -> str:
        return root_path(self._root, self._config.base_path)

    @property
    def expanded(self) -> ExpandState:
        return self._expanded

    @property
    def selected(self) -> str:
        return self._selected

    @property
    def breadcrumb(self) -> tuple[str, ...]:
        return derive_breadcrumb(self._selected)

    def is_expanded(self, path: str) -> bool:
        return self._expanded.get(path, False)

    def set_tree(self, root: Node) -> bool:
        """Adopt a new tree, re-deriving all state when its identity changed."""
        if root is self._root:
            return False
        self._root = root
        self._rederive()
        return True

    def set_config(self, config: TreeViewConfig) -> bool:
        """Adopt new options, re-deriving all state when they differ."""
        if config == self._config:
            return False
        self._config = config
        self._rederive()
        return True

    def handle_row_click(self, path: str) -> str:
        self._selected = select_path(path)
        return self._selected

    def handle_toggle_click(self, path: str) -> ExpandState:
        self._expanded = toggle_path(self._expanded, path)
        return self._expanded

    def toggle_all(self) -> ExpandState:
        config = self._config
        self._expanded = toggle_all(
            self._expanded, self._root, config.base_path, config.default_expand_depth
        )
        return self._expanded

    def reveal(self, path: str) -> ExpandState:
        """Expand the ancestors of ``path`` so its row becomes visible."""
        self._expanded = expand_path_ancestors(self._expanded, path)
        return self._expanded

    def handle_copy_click(self, path: str) -> None:
        """Hand ``path`` to the clipboard collaborator without waiting on it."""
        try:
            self._copy_text(path)
        except Exception:
            logger.debug("clipboard collaborator failed for %r", path, exc_info=True)

    def copy_selected(self) -> None:
        self.handle_copy_click(self._selected)

    def rows(self) -> list[TreeRow]:
        return list(visible_rows(self._root, self._config.base_path, self._expanded, self._selected))


__all__ = ["FileTreeView"]
