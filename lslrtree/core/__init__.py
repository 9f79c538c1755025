"""Core abstractions for lslrtree.

This package contains the tree model, the query expression family and the
traversal schedulers. None of it performs I/O.
"""

from .node import ListingNode, FileNode, DirectoryNode, NodeType
from .expression import (
    Expression,
    NullExpression,
    NameExpression,
    TypeExpression,
    SizeEqExpression,
    SizeLtExpression,
    SizeGtExpression,
    NotExpression,
    AndExpression,
    OrExpression,
    evaluate,
)
from .scheduler import (
    Scheduler,
    DepthFirstScheduler,
    BreadthFirstScheduler,
    create_scheduler,
)

__all__ = [
    "ListingNode",
    "FileNode",
    "DirectoryNode",
    "NodeType",
    "Expression",
    "NullExpression",
    "NameExpression",
    "TypeExpression",
    "SizeEqExpression",
    "SizeLtExpression",
    "SizeGtExpression",
    "NotExpression",
    "AndExpression",
    "OrExpression",
    "evaluate",
    "Scheduler",
    "DepthFirstScheduler",
    "BreadthFirstScheduler",
    "create_scheduler",
]
