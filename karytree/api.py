"""High-level API for karytree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree and cursor classes for ease of
use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple, Union

from .config import RootPolicy, TraversalOrder, TreeConfig
from .core.node import Node
from .core.tree import Tree


def build_tree(
    root_key: Any,
    edges: Iterable[Tuple[Any, Any]],
    arity: int = 2,
    root_policy: RootPolicy = RootPolicy.REPLACE,
) -> Tree:
    """Build a tree from a root key and (parent_key, child_key) pairs.

    Pairs are applied in order, so a parent must be added before its
    children.

    Args:
        root_key: Key of the root node
        edges: (parent_key, child_key) pairs
        arity: Maximum children per node
        root_policy: Root policy for the new tree

    Returns:
        The populated Tree

    Raises:
        ParentNotFound: If an edge names a parent not yet in the tree
        CapacityExceeded: If a node would get more than ``arity`` children

    Example:
        >>> tree = build_tree(10, [(10, 20), (10, 15), (20, 25), (20, 30)])
        >>> collect_keys(tree)
        [10, 20, 15, 25, 30]
    """
    tree = Tree.from_config(TreeConfig(arity=arity, root_policy=root_policy))
    tree.add_root(root_key)
    for parent_key, child_key in edges:
        tree.add_sub_node(parent_key, child_key)
    return tree


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Traversal order (bfs, dfs, pre_order, post_order, in_order,
            min_heap). min_heap reshapes the tree.

    Returns:
        Cursor yielding nodes in the requested order

    Raises:
        ValueError: If the order is unknown
        ArityMismatch: If in_order or min_heap is requested on a non-binary tree
    """
    return tree.traverse(order)


def collect_keys(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
) -> List[Any]:
    """Return the keys of all nodes in the requested order."""
    return [node.key for node in traverse_tree(tree, order)]


def count_nodes(tree: Tree) -> int:
    count = 0
    for _ in traverse_tree(tree):
        count += 1
    return count


def find_nodes(
    tree: Tree,
    predicate: Callable[[Node], bool],
    order: Union[TraversalOrder, str] = TraversalOrder.BREADTH_FIRST,
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching nodes
        order: Order in which matches are yielded

    Yields:
        Nodes that match the predicate

    Example:
        >>> tree = build_tree(10, [(10, 20), (10, 15)])
        >>> [node.key for node in find_nodes(tree, lambda n: n.key > 12)]
        [20, 15]
    """
    for node in traverse_tree(tree, order):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: Tree) -> Iterator[Node]:
    """Get all leaf nodes, breadth-first."""
    return find_nodes(tree, lambda node: node.is_leaf())


def iter_with_depth(tree: Tree) -> Iterator[Tuple[Node, int]]:
    """Walk the tree in pre-order, yielding (node, depth) pairs.

    Depth is 0 for the root.
    """
    if tree.root is None:
        return
    stack: List[Tuple[Node, int]] = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        a per-depth node count in ``depths``, and average_branching
        (children per internal node)

    Example:
        >>> stats = get_tree_stats(build_tree(10, [(10, 20), (10, 15)]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (3, 2, 1)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }
    child_links = 0

    for node, depth in iter_with_depth(tree):
        stats['total_nodes'] += 1
        child_links += len(node.children)

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        child_links / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def heap_sorted_keys(tree: Tree) -> List[Any]:
    """Return all keys in ascending order via the min-heap transform.

    This reshapes ``tree`` into heap order as a side effect.

    Raises:
        ArityMismatch: If the tree is not binary
    """
    return [node.key for node in tree.into_heap_order()]
