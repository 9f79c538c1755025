"""Search execution for lslrtree.

The SearchExecutor ties a parsed query expression, a traversal scheduler and
the tree together. It is the only consumer that distinguishes files from
directories during a walk: every visited node is tested, and directories
additionally hand their children to the scheduler.
"""

import logging
from typing import Any, Dict, Iterator, Optional, TextIO

from .config import SearchConfig
from .core.expression import Expression, evaluate
from .core.node import DirectoryNode, ListingNode
from .core.scheduler import Scheduler, create_scheduler

logger = logging.getLogger(__name__)


class SearchExecutor:
    """Runs one query over a tree.

    Each execute() drains its scheduler completely, so an executor can be
    reused for several searches as long as the previous one finished.
    """

    def __init__(self,
                 expression: Expression,
                 scheduler: Optional[Scheduler] = None,
                 config: Optional[SearchConfig] = None):
        """Create an executor.

        Args:
            expression: Parsed query
            scheduler: Pending-work store; built from config when omitted
            config: Search options, used only when scheduler is None

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or SearchConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.expression = expression
        self.scheduler = scheduler if scheduler is not None else create_scheduler(self.config.strategy)

        # Track execution state
        self.nodes_visited = 0
        self.matches_found = 0

    def execute(self, start: ListingNode) -> Iterator[ListingNode]:
        """Walk the tree below start and yield every matching node.

        Args:
            start: Node the search begins at; it is itself a candidate

        Yields:
            Matching nodes in scheduler order
        """
        self.nodes_visited = 0
        self.matches_found = 0

        self.scheduler.schedule_many([start])
        while True:
            node = self.scheduler.next_node()
            if node is None:
                break
            self.nodes_visited += 1

            if evaluate(self.expression, node):
                self.matches_found += 1
                yield node

            # Children are walked whether or not the directory matched
            if isinstance(node, DirectoryNode):
                self.scheduler.schedule_many(node.children)

        logger.debug("Search finished: %s", self.get_summary())

    def search(self, start: ListingNode) -> Iterator[str]:
        """Yield the path of each match relative to start."""
        for node in self.execute(start):
            yield node.relative_path(start)

    def emit(self, start: ListingNode, out: TextIO) -> int:
        """Write one relative path per line to out.

        Returns:
            Number of matches written
        """
        count = 0
        for path in self.search(start):
            out.write(path + "\n")
            count += 1
        return count

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the last execution.

        Useful for debugging and logging.
        """
        return {
            'expression': str(self.expression),
            'scheduler': self.scheduler.__class__.__name__,
            'nodes_visited': self.nodes_visited,
            'matches_found': self.matches_found,
        }
