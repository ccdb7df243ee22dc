"""Configuration system for karytree.

This module defines how users describe a tree: its branching factor, what
happens when a second root is added, and which order plain iteration uses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalOrder(Enum):
    """Order in which a cursor visits nodes."""
    BREADTH_FIRST = "bfs"       # Level by level
    DEPTH_FIRST = "dfs"         # Generic exhaustive walk, parent first
    PRE_ORDER = "pre_order"     # Parent before children
    POST_ORDER = "post_order"   # Children before parent
    IN_ORDER = "in_order"       # Left, parent, right (binary only)
    MIN_HEAP = "min_heap"       # Ascending keys, reshapes the tree


class RootPolicy(Enum):
    """What add_root does when the tree already has a root."""
    REPLACE = "replace"   # Drop the old tree and start over
    REJECT = "reject"     # Raise RootAlreadySet


# Orders that only make sense when every node has at most two children
BINARY_ONLY_ORDERS = frozenset({TraversalOrder.IN_ORDER, TraversalOrder.MIN_HEAP})


@dataclass
class TreeConfig:
    """Complete configuration for a Tree.

    Tree.from_config() validates this before the tree is built.
    """

    # Maximum children per node
    arity: int = 2

    # Behaviour of add_root on a non-empty tree
    root_policy: RootPolicy = RootPolicy.REPLACE

    # Order used by iter(tree)
    default_order: TraversalOrder = TraversalOrder.BREADTH_FIRST

    @classmethod
    def binary(cls, root_policy: RootPolicy = RootPolicy.REPLACE) -> 'TreeConfig':
        """Create config for a binary tree.

        Args:
            root_policy: Behaviour of add_root on a non-empty tree

        Returns:
            TreeConfig with arity 2
        """
        return cls(arity=2, root_policy=root_policy)

    @classmethod
    def k_ary(cls, k: int, root_policy: RootPolicy = RootPolicy.REPLACE) -> 'TreeConfig':
        """Create config for a tree with up to k children per node.

        Args:
            k: Maximum children per node
            root_policy: Behaviour of add_root on a non-empty tree

        Returns:
            TreeConfig with the given arity
        """
        return cls(arity=k, root_policy=root_policy)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.arity, int) or isinstance(self.arity, bool):
            errors.append("arity must be an integer")
        elif self.arity < 1:
            errors.append("arity must be at least 1")

        if not isinstance(self.root_policy, RootPolicy):
            errors.append(f"unknown root_policy: {self.root_policy!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"unknown default_order: {self.default_order!r}")
        elif self.default_order is TraversalOrder.MIN_HEAP:
            errors.append("default_order cannot be MIN_HEAP (it reshapes the tree)")
        elif (self.default_order in BINARY_ONLY_ORDERS
              and isinstance(self.arity, int) and self.arity != 2):
            errors.append(f"default_order {self.default_order.value} requires arity 2")

        return errors
