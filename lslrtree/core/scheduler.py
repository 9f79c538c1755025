"""Traversal scheduling strategies for lslrtree.

A scheduler is the pending-work store of a search. It knows nothing about
tree shape: the search executor hands it batches of nodes to visit later and
asks for the next one. The order in which batches come back out is what
makes a search depth-first or breadth-first.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterable, List, Optional, Union

from ..config import TraversalStrategy
from .node import ListingNode


class Scheduler(ABC):
    """Abstract base class for traversal scheduling strategies."""

    @abstractmethod
    def schedule_many(self, nodes: Iterable[ListingNode]) -> None:
        """Enqueue a batch of nodes for later visitation.

        Args:
            nodes: Nodes in their natural (listing) order
        """
        pass

    @abstractmethod
    def next_node(self) -> Optional[ListingNode]:
        """Dequeue the next node to visit.

        Returns:
            The next node, or None when nothing is pending
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of pending nodes."""
        pass


class DepthFirstScheduler(Scheduler):
    """Stack-backed scheduler giving pre-order depth-first visitation.

    Batches are pushed in reverse so they pop in their original order, and
    a directory's children are exhausted before its next sibling.
    """

    def __init__(self):
        self._stack: List[ListingNode] = []

    def schedule_many(self, nodes: Iterable[ListingNode]) -> None:
        batch = list(nodes)
        batch.reverse()
        self._stack.extend(batch)

    def next_node(self) -> Optional[ListingNode]:
        if not self._stack:
            return None
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class BreadthFirstScheduler(Scheduler):
    """Queue-backed scheduler giving level-order visitation."""

    def __init__(self):
        self._queue: Deque[ListingNode] = deque()

    def schedule_many(self, nodes: Iterable[ListingNode]) -> None:
        self._queue.extend(nodes)

    def next_node(self) -> Optional[ListingNode]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


# Factory function for creating schedulers by name
def create_scheduler(strategy: Union[TraversalStrategy, str]) -> Scheduler:
    """Create a fresh scheduler for a strategy.

    Args:
        strategy: TraversalStrategy or name (dfs, depth_first, bfs, breadth_first)

    Returns:
        Empty Scheduler instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs': DepthFirstScheduler,
        'depth_first': DepthFirstScheduler,
        'bfs': BreadthFirstScheduler,
        'breadth_first': BreadthFirstScheduler,
    }

    if isinstance(strategy, TraversalStrategy):
        name = strategy.value
    else:
        name = str(strategy).lower()

    if name not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[name]()
