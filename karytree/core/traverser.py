"""Tree traversal cursors for karytree.

Cursors implement the different orders for walking a Tree. Each one is a
plain Python iterator holding only the stack, queue or buffer it needs to
resume, so several cursors can read the same tree side by side.

Cursors hold references into the tree. Adding nodes or running the heap
transform while a cursor is still live leaves that cursor with stale
results; this is not detected.
"""

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, Optional, Union

from ..config import TraversalOrder
from ..errors import ArityMismatch, IteratorExhausted
from .node import Node

if TYPE_CHECKING:
    from .tree import Tree


class CursorState(Enum):
    """Lifecycle of a cursor."""
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class TreeCursor(ABC):
    """Abstract base class for traversal cursors.

    A cursor is ACTIVE while nodes remain and EXHAUSTED afterwards; a cursor
    over an empty tree starts out EXHAUSTED. Advancing an exhausted cursor
    raises IteratorExhausted, which is a StopIteration, so ``for`` loops
    and ``list()`` stop cleanly.
    """

    order: TraversalOrder

    def __init__(self, tree: "Tree"):
        """Initialize cursor over a tree.

        Args:
            tree: Tree to walk, read through its current root
        """
        self.tree = tree
        self.reset()

    @abstractmethod
    def _seed(self, root: Optional[Node]) -> None:
        """Rebuild internal state so the next node is the first in order."""
        pass

    @abstractmethod
    def _has_next(self) -> bool:
        pass

    @abstractmethod
    def _current(self) -> Node:
        """Return the next node without consuming it."""
        pass

    @abstractmethod
    def _advance(self) -> None:
        """Consume the node returned by _current()."""
        pass

    def reset(self) -> None:
        """Restart from the tree's current root."""
        self._seed(self.tree.root)

    @property
    def state(self) -> CursorState:
        return CursorState.ACTIVE if self._has_next() else CursorState.EXHAUSTED

    @property
    def exhausted(self) -> bool:
        return not self._has_next()

    def peek(self) -> Node:
        """Return the next node without advancing.

        Raises:
            IteratorExhausted: If no nodes remain
        """
        if not self._has_next():
            raise IteratorExhausted(f"{self.__class__.__name__} is exhausted")
        return self._current()

    def __iter__(self) -> "TreeCursor":
        return self

    def __next__(self) -> Node:
        node = self.peek()
        self._advance()
        return node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(order={self.order.value}, state={self.state.value})"


class PreOrderCursor(TreeCursor):
    """Depth-first pre-order cursor.

    Visits a parent before its children, children left to right. Suited to
    evaluating or copying expression trees.
    """

    order = TraversalOrder.PRE_ORDER

    def _seed(self, root: Optional[Node]) -> None:
        self._stack: List[Node] = [root] if root is not None else []

    def _has_next(self) -> bool:
        return bool(self._stack)

    def _current(self) -> Node:
        return self._stack[-1]

    def _advance(self) -> None:
        node = self._stack.pop()
        # Reversed so the leftmost child is popped next
        self._stack.extend(reversed(node.children))


class DepthFirstCursor(PreOrderCursor):
    """Generic depth-first walk.

    Same visiting order as PreOrderCursor; kept as its own type so call
    sites can say which of the two they mean.
    """

    order = TraversalOrder.DEPTH_FIRST


class PostOrderCursor(TreeCursor):
    """Depth-first post-order cursor.

    Visits children before their parent. The whole order is computed when
    the cursor is created; advancing only pops the precomputed output stack.
    """

    order = TraversalOrder.POST_ORDER

    def _seed(self, root: Optional[Node]) -> None:
        self._output: List[Node] = []
        if root is None:
            return

        stack = [root]
        while stack:
            node = stack.pop()
            self._output.append(node)
            # Forward order here gives left-to-right order when the output
            # stack is popped
            stack.extend(node.children)

    def _has_next(self) -> bool:
        return bool(self._output)

    def _current(self) -> Node:
        return self._output[-1]

    def _advance(self) -> None:
        self._output.pop()


class InOrderCursor(TreeCursor):
    """In-order cursor for binary trees.

    Left subtree, node, right subtree. Only ``children[0]`` (left) and
    ``children[1]`` (right) take part; a node with a single child treats it
    as its left child.
    """

    order = TraversalOrder.IN_ORDER

    def __init__(self, tree: "Tree"):
        if tree.arity != 2:
            raise ArityMismatch("in-order traversal", tree.arity)
        super().__init__(tree)

    def _seed(self, root: Optional[Node]) -> None:
        self._stack: List[Node] = []
        self._push_left(root)

    def _push_left(self, node: Optional[Node]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.children[0] if node.children else None

    def _has_next(self) -> bool:
        return bool(self._stack)

    def _current(self) -> Node:
        return self._stack[-1]

    def _advance(self) -> None:
        node = self._stack.pop()
        if len(node.children) > 1:
            self._push_left(node.children[1])


class BreadthFirstCursor(TreeCursor):
    """Breadth-first (level-order) cursor.

    Visits all nodes at depth N before any node at depth N+1. This is the
    tree's default iteration order.
    """

    order = TraversalOrder.BREADTH_FIRST

    def _seed(self, root: Optional[Node]) -> None:
        self._queue: Deque[Node] = deque()
        if root is not None:
            self._queue.append(root)

    def _has_next(self) -> bool:
        return bool(self._queue)

    def _current(self) -> Node:
        return self._queue[0]

    def _advance(self) -> None:
        node = self._queue.popleft()
        self._queue.extend(node.children)


_CURSORS = {
    TraversalOrder.BREADTH_FIRST: BreadthFirstCursor,
    TraversalOrder.DEPTH_FIRST: DepthFirstCursor,
    TraversalOrder.PRE_ORDER: PreOrderCursor,
    TraversalOrder.POST_ORDER: PostOrderCursor,
    TraversalOrder.IN_ORDER: InOrderCursor,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from a string or enum.

    Args:
        order: Order as enum or name (bfs, dfs, pre, post, in, heap, ...)

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'bfs': TraversalOrder.BREADTH_FIRST,
        'breadth_first': TraversalOrder.BREADTH_FIRST,
        'level': TraversalOrder.BREADTH_FIRST,
        'dfs': TraversalOrder.DEPTH_FIRST,
        'depth_first': TraversalOrder.DEPTH_FIRST,
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'in': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'heap': TraversalOrder.MIN_HEAP,
        'min_heap': TraversalOrder.MIN_HEAP,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )


def create_cursor(order: Union[TraversalOrder, str], tree: "Tree") -> TreeCursor:
    """Create a read-only cursor by order.

    The min-heap order is refused here because it reshapes the tree; use
    Tree.into_heap_order() for it.

    Args:
        order: Traversal order or its name
        tree: Tree to walk

    Returns:
        TreeCursor instance

    Raises:
        ValueError: If the order is unknown or is the min-heap order
        ArityMismatch: If in-order is requested on a non-binary tree
    """
    parsed = parse_order(order)
    if parsed is TraversalOrder.MIN_HEAP:
        raise ValueError(
            "min-heap order reshapes the tree; call Tree.into_heap_order() instead"
        )
    return _CURSORS[parsed](tree)
