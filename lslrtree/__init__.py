"""lslrtree - browse and search saved directory listings.

lslrtree turns the text of an `ls -lR` run into an in-memory tree and answers
find-style queries over it, without touching the real filesystem.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from lslrtree import load_listing, dfs

    root = load_listing("listing.txt")
    for path in dfs(root, ["-name", "*.txt", "-a", "-size", "+1024"]):
        print(path)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import ListingNode, FileNode, DirectoryNode, NodeType
from .core.expression import Expression, evaluate
from .core.scheduler import (
    Scheduler,
    DepthFirstScheduler,
    BreadthFirstScheduler,
    create_scheduler,
)

# Parsing and execution
from .listing import ListingParser
from .query import QueryParser, parse_query
from .search import SearchExecutor

# Configuration and errors
from .config import ListingConfig, SearchConfig, ShellConfig, TraversalStrategy
from .errors import (
    LsLRError,
    ListingError,
    MalformedListingLine,
    EmptyListingError,
    PathResolutionError,
    UnknownDirectoryEntry,
    InvalidPathSegment,
    QueryParseError,
    CommandError,
)

# High-level API
from .api import (
    parse_listing,
    load_listing,
    find,
    dfs,
    bfs,
    count_matches,
    resolve_path,
)
from .shell import Shell

__all__ = [
    "__version__",
    # Core
    "ListingNode",
    "FileNode",
    "DirectoryNode",
    "NodeType",
    "Expression",
    "evaluate",
    "Scheduler",
    "DepthFirstScheduler",
    "BreadthFirstScheduler",
    "create_scheduler",
    "ListingParser",
    "QueryParser",
    "parse_query",
    "SearchExecutor",
    # Config
    "ListingConfig",
    "SearchConfig",
    "ShellConfig",
    "TraversalStrategy",
    # Errors
    "LsLRError",
    "ListingError",
    "MalformedListingLine",
    "EmptyListingError",
    "PathResolutionError",
    "UnknownDirectoryEntry",
    "InvalidPathSegment",
    "QueryParseError",
    "CommandError",
    # API
    "parse_listing",
    "load_listing",
    "find",
    "dfs",
    "bfs",
    "count_matches",
    "resolve_path",
    "Shell",
]
