"""Testing utilities for karytree consumers."""

from .fixtures import build_sample_tree, build_typed_tree, TreeShapeHelper

__all__ = ["build_sample_tree", "build_typed_tree", "TreeShapeHelper"]
