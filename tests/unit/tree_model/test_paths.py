"""Path addressing tests: joining, node paths, and ancestor prefixes."""

from __future__ import annotations

import unittest

from filetree.tree_model import Node, ancestor_paths, join_path, node_path, root_path


class JoinPathTests(unittest.TestCase):
    def test_strips_outer_slashes_from_each_segment(self) -> None:
        self.assertEqual(join_path("a/", "/b/"), "a/b")
        self.assertEqual(join_path("//apps/web//", "src"), "apps/web/src")

    def test_drops_empty_and_none_segments(self) -> None:
        self.assertEqual(join_path("", "x"), "x")
        self.assertEqual(join_path(None, "x", ""), "x")

    def test_no_segments_is_empty_string(self) -> None:
        self.assertEqual(join_path(), "")

    def test_is_associative_on_clean_segments(self) -> None:
        self.assertEqual(join_path(join_path("a", "b"), "c"), join_path("a", join_path("b", "c")))

    def test_is_idempotent_on_clean_path(self) -> None:
        self.assertEqual(join_path(join_path("root", "src")), "root/src")


class NodePathTests(unittest.TestCase):
    def test_root_path_prepends_base_path(self) -> None:
        root = Node.directory("web")
        self.assertEqual(root_path(root, "apps/"), "apps/web")
        self.assertEqual(root_path(root), "web")

    def test_nameless_root_degrades_to_base_path(self) -> None:
        self.assertEqual(root_path(Node.directory(""), "/apps/"), "apps")
        self.assertEqual(root_path(Node.directory("")), "")

    def test_node_path_joins_parent_and_name(self) -> None:
        self.assertEqual(node_path("root/src", Node.file("app.py")), "root/src/app.py")

    def test_ancestor_paths_lists_proper_prefixes(self) -> None:
        self.assertEqual(ancestor_paths("root/src/app"), ["root", "root/src"])
        self.assertEqual(ancestor_paths("root"), [])
        self.assertEqual(ancestor_paths(""), [])


if __name__ == "__main__":
    unittest.main()
