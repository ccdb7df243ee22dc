"""The arity-bounded tree container.

Tree owns a single optional root and enforces the branching factor. Nodes
are added by key: add_sub_node searches the tree for a node whose key
equals the parent's key and attaches a new child below it. Nodes are never
removed or moved, apart from the reshaping done by into_heap_order().
"""

import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar, Union

from ..config import RootPolicy, TraversalOrder, TreeConfig
from ..errors import CapacityExceeded, ParentNotFound, RootAlreadySet
from .heap import MinHeapCursor
from .node import Node, key_of
from .traverser import (
    BreadthFirstCursor,
    DepthFirstCursor,
    InOrderCursor,
    PostOrderCursor,
    PreOrderCursor,
    TreeCursor,
    create_cursor,
    parse_order,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Tree(Generic[T]):
    """A k-ary tree with key-based insertion and several traversal cursors.

    The tree stores its own nodes: add_root and add_sub_node copy the key
    they are given into a new Node and return that node. Later changes to
    the caller's objects never reach the tree.

    Keys should be unique. add_sub_node attaches below the first node with
    a matching key in pre-order, so with duplicate keys the parent chosen
    may not be the one the caller had in mind.

    Example:
        >>> tree = Tree(arity=2)
        >>> root = tree.add_root(10)
        >>> left = tree.add_sub_node(10, 20)
        >>> right = tree.add_sub_node(root, 15)
        >>> [node.key for node in tree.bfs()]
        [10, 20, 15]
    """

    def __init__(self,
                 arity: int = 2,
                 root_policy: RootPolicy = RootPolicy.REPLACE,
                 default_order: TraversalOrder = TraversalOrder.BREADTH_FIRST):
        """Create an empty tree.

        Args:
            arity: Maximum number of children per node
            root_policy: What add_root does when a root already exists
            default_order: Order used by iter(tree)

        Raises:
            ValueError: If the configuration is invalid
        """
        config = TreeConfig(arity=arity, root_policy=root_policy,
                            default_order=default_order)
        config_errors = config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.config = config
        self._root: Optional[Node[T]] = None

    @classmethod
    def from_config(cls, config: TreeConfig) -> "Tree":
        return cls(arity=config.arity, root_policy=config.root_policy,
                   default_order=config.default_order)

    @property
    def arity(self) -> int:
        return self.config.arity

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    def get_root(self) -> Optional[Node[T]]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    # Mutation

    def add_root(self, node: Union[Node[T], T]) -> Node[T]:
        """Set the root of the tree.

        Args:
            node: A Node (only its key is used) or a bare key

        Returns:
            The tree-owned root node

        Raises:
            RootAlreadySet: If a root exists and the policy is REJECT
        """
        key = key_of(node)
        if self._root is not None:
            if self.config.root_policy is RootPolicy.REJECT:
                raise RootAlreadySet(self._root.key)
            logger.debug("Replacing root %r with %r", self._root.key, key)

        self._root = Node(key)
        return self._root

    def add_sub_node(self, parent: Union[Node[T], T], child: Union[Node[T], T]) -> Node[T]:
        """Attach a new child below the node whose key matches parent's key.

        Args:
            parent: Node or key identifying the parent
            child: Node (only its key is used) or key for the new child

        Returns:
            The tree-owned child node

        Raises:
            ParentNotFound: If no node has the parent's key
            CapacityExceeded: If the parent already has ``arity`` children
        """
        parent_key = key_of(parent)
        target = self.find_node(parent_key)
        if target is None:
            raise ParentNotFound(parent_key)
        if len(target.children) >= self.arity:
            raise CapacityExceeded(parent_key, self.arity)

        new_node = Node(key_of(child))
        target.add_child(new_node)
        logger.debug("Added %r under %r (%d/%d children)",
                     new_node.key, parent_key, len(target.children), self.arity)
        return new_node

    def _set_root(self, node: Node[T]) -> None:
        # Used by the heap transform when it relinks the tree
        self._root = node

    # Lookup

    def find_node(self, key: Union[Node[T], T]) -> Optional[Node[T]]:
        """Return the first node in pre-order whose key equals key.

        Args:
            key: Key to look for, or a Node whose key is used

        Returns:
            Matching Node or None
        """
        target = key_of(key)
        for node in PreOrderCursor(self):
            if node.key == target:
                return node
        return None

    def __contains__(self, key: Any) -> bool:
        return self.find_node(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in BreadthFirstCursor(self))

    def __bool__(self) -> bool:
        return self._root is not None

    # Cursors

    def bfs(self) -> BreadthFirstCursor:
        return BreadthFirstCursor(self)

    def dfs(self) -> DepthFirstCursor:
        return DepthFirstCursor(self)

    def pre_order(self) -> PreOrderCursor:
        return PreOrderCursor(self)

    def post_order(self) -> PostOrderCursor:
        return PostOrderCursor(self)

    def in_order(self) -> InOrderCursor:
        """In-order cursor; raises ArityMismatch unless arity is 2."""
        return InOrderCursor(self)

    def into_heap_order(self) -> MinHeapCursor:
        """Reshape the tree into a binary min-heap and iterate it.

        This MUTATES the tree. Every node's children are replaced so the
        tree matches a min-heap array layout, and the smallest key becomes
        the root. The returned cursor yields nodes in ascending key order.
        Traversals made afterwards see the heap shape.

        Raises:
            ArityMismatch: If arity is not 2
        """
        return MinHeapCursor(self)

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST) -> TreeCursor:
        """Return a cursor for the given order.

        The min-heap order is accepted here and, as with into_heap_order(),
        reshapes the tree.
        """
        if parse_order(order) is TraversalOrder.MIN_HEAP:
            return self.into_heap_order()
        return create_cursor(order, self)

    def __iter__(self) -> Iterator[Node[T]]:
        return create_cursor(self.config.default_order, self)

    # Textual dump

    def format(self) -> str:
        """Render the tree one node per line, indented two spaces per level.

        Walks pre-order with an explicit stack.
        """
        lines: List[str] = []
        stack = [(self._root, 0)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            lines.append(f"{'  ' * depth}{node}\n")
            stack.extend((child, depth + 1) for child in reversed(node.children))
        return "".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        root = self._root.key if self._root is not None else None
        return f"{self.__class__.__name__}(arity={self.arity}, root={root!r})"
