"""karytree - arity-bounded tree container with traversal cursors.

karytree stores keys in a k-ary tree, adds nodes below a parent found by
key, and walks the result with lazy, restartable cursors:

    from karytree import Tree

    tree = Tree(arity=2)
    tree.add_root(10)
    tree.add_sub_node(10, 20)
    for node in tree.pre_order():
        print(node.key)

Tree.into_heap_order() is the one traversal that changes the tree: it
reshapes it into a binary min-heap and yields keys in ascending order.
"""

import logging

__version__ = "0.1.0"

from .core import (
    Node,
    Tree,
    TreeCursor,
    CursorState,
    PreOrderCursor,
    PostOrderCursor,
    InOrderCursor,
    BreadthFirstCursor,
    DepthFirstCursor,
    MinHeapCursor,
    create_cursor,
)
from .config import TreeConfig, TraversalOrder, RootPolicy
from .errors import (
    TreeError,
    ParentNotFound,
    CapacityExceeded,
    ArityMismatch,
    RootAlreadySet,
    IteratorExhausted,
)
from .keys import Complex
from .api import (
    build_tree,
    traverse_tree,
    collect_keys,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    iter_with_depth,
    get_tree_stats,
    heap_sorted_keys,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
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
    # Config
    "TreeConfig",
    "TraversalOrder",
    "RootPolicy",
    # Errors
    "TreeError",
    "ParentNotFound",
    "CapacityExceeded",
    "ArityMismatch",
    "RootAlreadySet",
    "IteratorExhausted",
    # Keys
    "Complex",
    # API
    "build_tree",
    "traverse_tree",
    "collect_keys",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "iter_with_depth",
    "get_tree_stats",
    "heap_sorted_keys",
]
