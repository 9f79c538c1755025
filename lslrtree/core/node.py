"""Tree model for lslrtree.

A listing is represented as a tree of ListingNode objects. Nodes are plain
data containers built once by the listing parser: a directory owns its
children, and each child keeps a reference to its parent for path
reconstruction.
"""

import posixpath
from abc import ABC
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..errors import InvalidPathSegment, UnknownDirectoryEntry


class NodeType(Enum):
    """Discriminant for the two node variants, valued as find's -type letters."""
    FILE = "f"
    DIRECTORY = "d"


class ListingNode(ABC):
    """Abstract base class for a file or directory parsed from a listing.

    Attributes:
        line: The source line the node was parsed from (empty for the root)
        name: Name segment of the node (empty for the root)
        size: Size field from the listing
    """

    node_type: NodeType

    def __init__(self,
                 line: str,
                 parent: Optional['DirectoryNode'],
                 name: str,
                 size: int):
        """Initialize a node.

        Args:
            line: Original listing line, kept for display
            parent: Owning directory, None for the root
            name: Name segment
            size: Non-negative size in bytes
        """
        if size < 0:
            raise ValueError(f"size cannot be negative: {size}")
        self.line = line
        self.name = name
        self.size = size
        self._parent = parent

    @property
    def parent(self) -> Optional['DirectoryNode']:
        """The owning directory, or None for the root."""
        return self._parent

    def is_directory(self) -> bool:
        return self.node_type is NodeType.DIRECTORY

    def ancestors(self) -> Iterator['DirectoryNode']:
        """Yield the parent, grandparent, ... up to and including the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def depth(self) -> int:
        """Depth of this node where the root is 0."""
        return sum(1 for _ in self.ancestors())

    def path(self) -> str:
        """Absolute path of the node; the root is "/"."""
        if self.parent is None:
            return "/"
        names = [self.name]
        names.extend(ancestor.name for ancestor in self.ancestors())
        names.pop()  # root
        names.reverse()
        return posixpath.join("/", *names)

    def relative_path(self, base: 'ListingNode') -> str:
        """Path of this node relative to base.

        Args:
            base: A node on the path from the root to this node

        Returns:
            "." when this node is base, otherwise "a/b/name"

        Raises:
            ValueError: If this node does not live under base
        """
        if self is base:
            return "."
        names = [self.name]
        for ancestor in self.ancestors():
            if ancestor is base:
                names.reverse()
                return "/".join(names)
            names.append(ancestor.name)
        raise ValueError(f"{self.path()} is not inside {base.path()}")

    def metadata(self) -> Dict[str, Any]:
        """Return the lightweight metadata kept for this node."""
        return {
            'name': self.name,
            'type': self.node_type.value,
            'size': self.size,
            'path': self.path(),
            'line': self.line,
        }

    def __str__(self) -> str:
        """String representation is the original listing line."""
        return self.line

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path()!r}, size={self.size})"


class FileNode(ListingNode):
    """Any non-directory entry: regular files, links, devices, ..."""

    node_type = NodeType.FILE


class DirectoryNode(ListingNode):
    """A directory and its ordered children."""

    node_type = NodeType.DIRECTORY

    def __init__(self,
                 line: str,
                 parent: Optional['DirectoryNode'],
                 name: str,
                 size: int):
        super().__init__(line, parent, name, size)
        self._children: List[ListingNode] = []

    @property
    def children(self) -> Tuple[ListingNode, ...]:
        """Children in the order they appeared in the listing."""
        return tuple(self._children)

    def _append_child(self, child: ListingNode) -> None:
        # Only the listing parser builds trees
        if child.parent is not self:
            raise ValueError(f"{child!r} does not belong to {self!r}")
        self._children.append(child)

    def get_child(self, name: str) -> ListingNode:
        """Return the first child called name.

        Raises:
            UnknownDirectoryEntry: If there is no such child
        """
        for child in self._children:
            if child.name == name:
                return child
        raise UnknownDirectoryEntry(name)

    def get_descendant(self, path: str) -> ListingNode:
        """Resolve a relative "a/b/c" path below this directory.

        Raises:
            UnknownDirectoryEntry: If a segment is missing
            InvalidPathSegment: If a non-final segment is not a directory
        """
        current: ListingNode = self
        segments = path.split("/")
        for index, segment in enumerate(segments):
            if not isinstance(current, DirectoryNode):
                raise InvalidPathSegment(segments[index - 1], path)
            current = current.get_child(segment)
        return current
