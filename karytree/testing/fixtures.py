"""Test fixtures for karytree consumers.

These fixtures build small, well-known trees and give read-only access to
their shape, so test suites do not have to repeat the setup.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core.tree import Tree


def build_sample_tree(arity: int = 2) -> Tree:
    """Build the reference tree used throughout the karytree docs.

    Structure:
        10
        ├── 20
        │   ├── 25
        │   └── 30
        └── 15
    """
    return build_typed_tree([10, 20, 15, 25, 30], arity=arity)


def build_typed_tree(keys: Sequence[Any], arity: int = 2) -> Tree:
    """Build a five-node tree with the same shape as build_sample_tree.

    keys[0] is the root, keys[1] and keys[2] its children, and keys[3] and
    keys[4] the children of keys[1]. Useful for running the same checks
    against ints, floats, strings or Complex keys.

    Args:
        keys: Exactly five distinct keys
        arity: Arity of the tree (at least 2)

    Raises:
        ValueError: If keys does not hold exactly five items
    """
    if len(keys) != 5:
        raise ValueError(f"Expected 5 keys, got {len(keys)}")

    root, left, right, left_left, left_right = keys
    tree = Tree(arity=arity)
    tree.add_root(root)
    tree.add_sub_node(root, left)
    tree.add_sub_node(root, right)
    tree.add_sub_node(left, left_left)
    tree.add_sub_node(left, left_right)
    return tree


class TreeShapeHelper:
    """Read-only view of a tree's structure for assertions.

    Example:
        helper = TreeShapeHelper(tree)
        assert helper.children_of(10) == [20, 15]
        assert helper.respects_arity()
    """

    def __init__(self, tree: Tree):
        self._tree = tree

    def children_of(self, key: Any) -> Optional[List[Any]]:
        """Keys of the children of the node with the given key, or None."""
        node = self._tree.find_node(key)
        if node is None:
            return None
        return [child.key for child in node.children]

    def adjacency(self) -> Dict[Any, List[Any]]:
        """Map every key to its children's keys."""
        return {node.key: [child.key for child in node.children]
                for node in self._tree.bfs()}

    def respects_arity(self) -> bool:
        return all(len(node.children) <= self._tree.arity
                   for node in self._tree.bfs())

    def is_min_heap(self) -> bool:
        """True if no child has a smaller key than its parent."""
        return all(not (child.key < node.key)
                   for node in self._tree.bfs()
                   for child in node.children)

    def node_ids(self) -> List[int]:
        """Object identities of all nodes, breadth-first."""
        return [id(node) for node in self._tree.bfs()]
