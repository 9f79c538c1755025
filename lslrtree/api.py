"""High-level API for lslrtree.

This module provides simple, functional interfaces for the common cases:
load a listing, run a find-style query over it, resolve a path. These
functions wrap the object-oriented API for ease of use.
"""

import io
import posixpath
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from .config import ListingConfig, SearchConfig, TraversalStrategy
from .core.node import DirectoryNode, ListingNode
from .listing import ListingParser
from .query import parse_query
from .search import SearchExecutor


def parse_listing(
    source: Union[str, Iterable[str]],
    config: Optional[ListingConfig] = None,
) -> DirectoryNode:
    """Parse listing text into a tree.

    Args:
        source: The whole listing as one string, or an iterable of lines
        config: Parsing options

    Returns:
        Root directory of the listing

    Example:
        >>> root = parse_listing(".:\\ntotal 0\\n-rw-r--r-- 1 u g 3 Jan 1 00:00 a\\n")
        >>> [child.name for child in root.children]
        ['a']
    """
    if isinstance(source, str):
        source = io.StringIO(source)
    return ListingParser(config).parse(source)


def load_listing(
    path: Union[str, Path],
    config: Optional[ListingConfig] = None,
) -> DirectoryNode:
    """Parse a listing file into a tree.

    Args:
        path: File holding ls -lR output
        config: Parsing options (encoding, strictness)

    Returns:
        Root directory of the listing
    """
    return ListingParser(config).parse_file(path)


def find(
    start: ListingNode,
    query: Sequence[str] = (),
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST,
) -> Iterator[str]:
    """Run a find-style query and yield matching paths.

    Args:
        start: Node to search from
        query: Pre-split query tokens; empty matches everything
        strategy: Traversal order (dfs/bfs)

    Yields:
        Paths relative to start, in traversal order

    Example:
        >>> for path in find(root, ["-name", "*.txt"], strategy="bfs"):
        ...     print(path)
    """
    config = SearchConfig(strategy=_parse_strategy(strategy))
    executor = SearchExecutor(parse_query(query), config=config)
    yield from executor.search(start)


def dfs(start: ListingNode, query: Sequence[str] = ()) -> Iterator[str]:
    """Depth-first find()."""
    return find(start, query, TraversalStrategy.DEPTH_FIRST)


def bfs(start: ListingNode, query: Sequence[str] = ()) -> Iterator[str]:
    """Breadth-first find()."""
    return find(start, query, TraversalStrategy.BREADTH_FIRST)


def count_matches(
    start: ListingNode,
    query: Sequence[str] = (),
    **kwargs
) -> int:
    """Count nodes below start that match a query.

    Args:
        start: Node to search from
        query: Pre-split query tokens
        **kwargs: Options for find()
    """
    count = 0
    for _ in find(start, query, **kwargs):
        count += 1
    return count


def resolve_path(root: DirectoryNode, path: str, cwd: Optional[ListingNode] = None) -> ListingNode:
    """Resolve an absolute or cwd-relative path to a node.

    "." and ".." are normalised the POSIX way; ".." at the root stays at
    the root.

    Args:
        root: Root of the tree
        path: Path to resolve
        cwd: Directory relative paths start from (defaults to root)

    Raises:
        UnknownDirectoryEntry: If a segment is missing
        InvalidPathSegment: If a non-final segment is a file
    """
    base = cwd.path() if cwd is not None else "/"
    absolute = posixpath.normpath(posixpath.join(base, path))
    relative = absolute.lstrip("/")
    if not relative:
        return root
    return root.get_descendant(relative)


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'dfs': TraversalStrategy.DEPTH_FIRST,
        'depth_first': TraversalStrategy.DEPTH_FIRST,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
