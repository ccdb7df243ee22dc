"""Exceptions raised by karytree.

Every error the library raises for misuse derives from TreeError, so callers
can catch the whole family at once. All of them are local, recoverable
conditions: the caller fixes the call and tries again.
"""

from typing import Any


class TreeError(Exception):
    """Base class for karytree errors."""
    pass


class ParentNotFound(TreeError, LookupError):
    """Raised when add_sub_node cannot find a node with the parent's key."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"No node with key {key!r} in tree")


class CapacityExceeded(TreeError):
    """Raised when a node already holds as many children as the tree's arity."""

    def __init__(self, key: Any, arity: int):
        self.key = key
        self.arity = arity
        super().__init__(
            f"Node {key!r} already has {arity} children (arity={arity})"
        )


class ArityMismatch(TreeError):
    """Raised when a binary-only operation is requested on a non-binary tree."""

    def __init__(self, operation: str, arity: int):
        self.operation = operation
        self.arity = arity
        super().__init__(
            f"{operation} requires a binary tree (arity=2), got arity={arity}"
        )


class RootAlreadySet(TreeError):
    """Raised by add_root under RootPolicy.REJECT when a root exists."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Tree already has root {key!r}")


class IteratorExhausted(TreeError, StopIteration):
    """Raised when a cursor is advanced past its last node.

    Subclasses StopIteration so plain ``for`` loops end normally. The
    message is kept out of StopIteration.value, so ``yield from`` over an
    exhausted cursor evaluates to None.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.value = None
