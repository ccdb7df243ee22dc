#!/usr/bin/env python3
"""Basic usage of karytree.

Builds an integer tree and a Complex-keyed tree, prints every traversal
order, then reshapes each tree into min-heap order.
"""

from karytree import Complex, Tree


def show_orders(tree: Tree) -> None:
    print(tree.format(), end="")
    for name in ("bfs", "dfs", "pre_order", "post_order", "in_order"):
        keys = " ".join(str(node) for node in tree.traverse(name))
        print(f"  {name:<11} {keys}")


def main():
    # Integer tree
    tree = Tree(arity=2)
    tree.add_root(10)
    tree.add_sub_node(10, 20)
    tree.add_sub_node(10, 15)
    tree.add_sub_node(20, 30)

    print("Integer tree:")
    show_orders(tree)
    print("  min_heap    " + " ".join(str(node) for node in tree.into_heap_order()))
    print("After heap transform:")
    print(tree.format())

    # Complex tree
    complex_tree = Tree(arity=2)
    root = complex_tree.add_root(Complex(3, 4))
    complex_tree.add_sub_node(root, Complex(1, 2))
    complex_tree.add_sub_node(root, Complex(5, 6))

    print("Complex tree:")
    show_orders(complex_tree)
    print("  min_heap    " + " ".join(str(node) for node in complex_tree.into_heap_order()))


if __name__ == "__main__":
    main()
