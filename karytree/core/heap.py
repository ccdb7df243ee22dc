"""Min-heap transform for binary trees.

Unlike the other cursors, this one changes the tree: creating it rewires
every node's children so the tree takes the shape of a binary min-heap
array, then yields nodes in ascending key order. Any traversal made
afterwards sees the heap shape, not the tree as it was built.
"""

import heapq
import logging
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from ..config import TraversalOrder
from ..errors import ArityMismatch
from .node import Node
from .traverser import BreadthFirstCursor, TreeCursor

if TYPE_CHECKING:
    from .tree import Tree

logger = logging.getLogger(__name__)

# (key, breadth-first position, node); the position breaks key ties so
# nodes themselves are never compared
HeapEntry = Tuple[Any, int, Node]


def heapify_tree(tree: "Tree") -> List[HeapEntry]:
    """Reshape a binary tree into min-heap order, in place.

    Nodes are collected breadth-first, heapified by key, and then relinked
    so the node at heap index i has the nodes at 2i+1 and 2i+2 as its
    children. Previous child links are discarded. The node with the
    smallest key becomes the root.

    Args:
        tree: Binary tree to reshape

    Returns:
        The heap array as (key, position, node) entries

    Raises:
        ArityMismatch: If the tree's arity is not 2
    """
    if tree.arity != 2:
        raise ArityMismatch("min-heap transform", tree.arity)

    entries: List[HeapEntry] = [
        (node.key, position, node)
        for position, node in enumerate(BreadthFirstCursor(tree))
    ]
    if not entries:
        return entries

    heapq.heapify(entries)

    size = len(entries)
    for index, (_, _, node) in enumerate(entries):
        node.children = [
            entries[child][2]
            for child in (2 * index + 1, 2 * index + 2)
            if child < size
        ]
    tree._set_root(entries[0][2])

    logger.debug("Reshaped %d nodes into min-heap order, new root %r",
                 size, entries[0][0])
    return entries


class MinHeapCursor(TreeCursor):
    """Cursor yielding nodes in ascending key order.

    Creating the cursor runs heapify_tree() on the tree. Advancing pops the
    smallest remaining entry from the cursor's own heap array; the tree keeps
    the shape it was given at creation. reset() runs the transform again
    over the tree's current (already heap-shaped) structure.
    """

    order = TraversalOrder.MIN_HEAP

    def __init__(self, tree: "Tree"):
        if tree.arity != 2:
            raise ArityMismatch("min-heap transform", tree.arity)
        super().__init__(tree)

    def _seed(self, root: Optional[Node]) -> None:
        self._heap: List[HeapEntry] = heapify_tree(self.tree) if root is not None else []

    def _has_next(self) -> bool:
        return bool(self._heap)

    def _current(self) -> Node:
        return self._heap[0][2]

    def _advance(self) -> None:
        heapq.heappop(self._heap)
