"""Unit tests for the tree model: node variants, paths and resolution."""

import gc
import posixpath
import unittest

from lslrtree import (
    DirectoryNode,
    FileNode,
    InvalidPathSegment,
    NodeType,
    UnknownDirectoryEntry,
    parse_listing,
)

from conftest import PROJECT_LISTING, SMALL_LISTING


def walk(node):
    """Yield node and all its descendants."""
    yield node
    if node.is_directory():
        for child in node.children:
            yield from walk(child)


class TestNodePaths(unittest.TestCase):
    """Test absolute and relative path computation."""

    def setUp(self):
        self.root = parse_listing(PROJECT_LISTING)

    def test_root_path(self):
        """Root has path "/" and no parent."""
        self.assertEqual(self.root.path(), "/")
        self.assertIsNone(self.root.parent)
        self.assertEqual(self.root.name, "")

    def test_path_joins_parent_path_and_name(self):
        """Every non-root path is the parent's path joined with the name."""
        for node in walk(self.root):
            if node is self.root:
                continue
            self.assertEqual(node.path(), posixpath.join(node.parent.path(), node.name))

    def test_nested_path(self):
        util = self.root.get_descendant("src/lib/util.c")
        self.assertEqual(util.path(), "/src/lib/util.c")
        self.assertEqual(util.depth(), 3)

    def test_descendant_outlives_discarded_root(self):
        """A node kept on its own still knows its full path."""
        a_txt = parse_listing(SMALL_LISTING).get_descendant("sub/a.txt")
        gc.collect()
        self.assertEqual(a_txt.path(), "/sub/a.txt")
        self.assertEqual(a_txt.parent.name, "sub")
        self.assertEqual(a_txt.relative_path(a_txt.parent.parent), "sub/a.txt")

    def test_relative_path_to_self(self):
        src = self.root.get_child("src")
        self.assertEqual(src.relative_path(src), ".")

    def test_relative_path_below_base(self):
        src = self.root.get_child("src")
        util = self.root.get_descendant("src/lib/util.c")
        self.assertEqual(util.relative_path(src), "lib/util.c")
        self.assertEqual(util.relative_path(self.root), "src/lib/util.c")

    def test_relative_path_outside_base(self):
        """A node outside base has no relative path."""
        readme = self.root.get_child("README.md")
        src = self.root.get_child("src")
        with self.assertRaises(ValueError):
            readme.relative_path(src)


class TestNodeStructure(unittest.TestCase):
    """Test node variants, ownership and children order."""

    def setUp(self):
        self.root = parse_listing(PROJECT_LISTING)

    def test_variants(self):
        src = self.root.get_child("src")
        readme = self.root.get_child("README.md")
        self.assertIsInstance(src, DirectoryNode)
        self.assertIsInstance(readme, FileNode)
        self.assertTrue(src.is_directory())
        self.assertFalse(readme.is_directory())
        self.assertIs(src.node_type, NodeType.DIRECTORY)
        self.assertIs(readme.node_type, NodeType.FILE)

    def test_children_keep_listing_order(self):
        names = [child.name for child in self.root.children]
        self.assertEqual(names, ["src", "README.md", "empty file.txt", "link -> README.md"])

    def test_each_child_appears_once_in_its_parent(self):
        for node in walk(self.root):
            if node is self.root:
                continue
            occurrences = [c for c in node.parent.children if c is node]
            self.assertEqual(len(occurrences), 1)

    def test_children_are_read_only(self):
        self.assertIsInstance(self.root.children, tuple)
        with self.assertRaises(AttributeError):
            self.root.children.append(None)

    def test_str_is_source_line(self):
        readme = self.root.get_child("README.md")
        self.assertEqual(str(readme), "-rw-r--r-- 1 alice staff   42 Jan  1 00:00 README.md")

    def test_metadata(self):
        main = self.root.get_descendant("src/main.c")
        meta = main.metadata()
        self.assertEqual(meta['name'], "main.c")
        self.assertEqual(meta['type'], "f")
        self.assertEqual(meta['size'], 1200)
        self.assertEqual(meta['path'], "/src/main.c")
        self.assertEqual(meta['line'], str(main))

    def test_repr_mentions_path(self):
        self.assertIn("/src", repr(self.root.get_child("src")))

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            FileNode("", None, "x", -1)

    def test_foreign_child_rejected(self):
        other = DirectoryNode("", None, "", 0)
        orphan = FileNode("", other, "x", 1)
        with self.assertRaises(ValueError):
            self.root._append_child(orphan)


class TestPathResolution(unittest.TestCase):
    """Test get_child and get_descendant."""

    def setUp(self):
        self.root = parse_listing(SMALL_LISTING)

    def test_get_child(self):
        self.assertEqual(self.root.get_child("b.log").size, 5)

    def test_missing_child(self):
        with self.assertRaises(UnknownDirectoryEntry) as ctx:
            self.root.get_child("missing")
        self.assertEqual(ctx.exception.name, "missing")
        self.assertIn("missing", str(ctx.exception))

    def test_get_descendant(self):
        node = self.root.get_descendant("sub/a.txt")
        self.assertEqual(node.name, "a.txt")
        self.assertEqual(node.size, 10)

    def test_missing_descendant_names_segment(self):
        with self.assertRaises(UnknownDirectoryEntry) as ctx:
            self.root.get_descendant("sub/nope.txt")
        self.assertEqual(ctx.exception.name, "nope.txt")

    def test_descending_through_file(self):
        with self.assertRaises(InvalidPathSegment) as ctx:
            self.root.get_descendant("b.log/anything")
        self.assertEqual(ctx.exception.name, "b.log")


if __name__ == '__main__':
    unittest.main()
