"""Configuration system for lslrtree.

This module defines how callers tune listing parsing, query execution and
the interactive shell. Each configuration is a plain dataclass with a
validate() method that reports problems instead of raising.
"""

from dataclasses import dataclass, field
from enum import Enum
import codecs
from typing import List, Optional


class TraversalStrategy(Enum):
    """Order in which a search visits the tree."""
    DEPTH_FIRST = "dfs"      # Directory, then its whole subtree, then siblings
    BREADTH_FIRST = "bfs"    # Level by level


@dataclass
class ListingConfig:
    """Configuration for reading an ls -lR listing."""

    encoding: str = "utf-8"   # Encoding used by ListingParser.parse_file
    strict: bool = True       # Reject blocks for directories never listed

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"unknown encoding: {self.encoding}")
        return errors


@dataclass
class SearchConfig:
    """Configuration for a single search."""

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST

    def validate(self) -> List[str]:
        errors = []
        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")
        return errors


@dataclass
class ShellConfig:
    """Configuration for an interactive session."""

    prompt: str = "ls-lR> "
    interactive: Optional[bool] = None  # None = decide from stdin.isatty()
    listing: ListingConfig = field(default_factory=ListingConfig)

    def validate(self) -> List[str]:
        errors = []
        if "\n" in self.prompt:
            errors.append("prompt must be a single line")
        errors.extend(self.listing.validate())
        return errors
