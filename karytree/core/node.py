"""Node type for karytree.

A Node is a labeled vertex with an ordered list of children. It knows
nothing about the tree that owns it: the arity bound and key lookup live in
Tree, which is the only thing that should call add_child.
"""

from typing import Any, Generic, List, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A key plus an ordered list of owned child nodes.

    The key is fixed at construction. Children are visited in insertion
    order by every traversal. A node belongs to at most one parent, or to
    the tree itself when it is the root.

    Nodes do not override equality: two nodes are the same node only if
    they are the same object. Key equality is what Tree uses to find a
    parent, see Tree.find_node.
    """

    __slots__ = ("_key", "children")

    def __init__(self, key: T):
        """Create a leaf node.

        Args:
            key: Payload and lookup key. Must support ``==``; in-order and
                heap traversal also need ``<``.
        """
        self._key = key
        self.children: List["Node[T]"] = []

    @property
    def key(self) -> T:
        """The node's key (read-only)."""
        return self._key

    def get_key(self) -> T:
        return self._key

    def add_child(self, child: "Node[T]") -> None:
        """Append a child. No arity check is done here."""
        self.children.append(child)

    def is_leaf(self) -> bool:
        return not self.children

    def __str__(self) -> str:
        """Label text, as used by textual dumps and renderers."""
        return str(self._key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self._key!r}, children={len(self.children)})"


def key_of(key_bearer: Any) -> Any:
    """Return the key carried by a Node, or the argument itself otherwise."""
    if isinstance(key_bearer, Node):
        return key_bearer.key
    return key_bearer
