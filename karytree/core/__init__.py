"""Core abstractions for karytree.

This module contains the node, the tree container, and the cursors that
walk it.
"""

from .node import Node
from .tree import Tree
from .traverser import (
    TreeCursor,
    CursorState,
    PreOrderCursor,
    PostOrderCursor,
    InOrderCursor,
    BreadthFirstCursor,
    DepthFirstCursor,
    create_cursor,
    parse_order,
)
from .heap import MinHeapCursor, heapify_tree

__all__ = [
    "Node",
    "Tree",
    "TreeCursor",
    "CursorState",
    "PreOrderCursor",
    "PostOrderCursor",
    "InOrderCursor",
    "BreadthFirstCursor",
    "DepthFirstCursor",
    "MinHeapCursor",
    "create_cursor",
    "parse_order",
    "heapify_tree",
]
