"""Binary search trees: linked nodes and an index-addressed node list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a value and its two children."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


@dataclass
class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the left."""

    root: Optional[Node] = None

    def add(self, value: int) -> Node:
        """Insert ``value`` and return its new node."""
        node = Node(value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left

    def find(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current


def find_in_subtree(root: Optional[Node], value: int) -> Optional[Node]:
    """Recursively search the subtree at ``root`` for ``value``."""
    if root is None:
        return None
    if value == root.value:
        return root
    return find_in_subtree(root.right if value > root.value else root.left, value)


def add_into_subtree(root: Node, node: Node) -> None:
    """Recursively attach ``node`` below ``root``."""
    if node.value > root.value:
        if root.right is None:
            root.right = node
        else:
            add_into_subtree(root.right, node)
    else:
        if root.left is None:
            root.left = node
        else:
            add_into_subtree(root.left, node)


def build_tree(values: Iterable[int]) -> BinarySearchTree:
    """Build a tree by inserting ``values`` in order."""
    tree = BinarySearchTree()
    for value in values:
        tree.add(value)
    return tree


@dataclass
class IndexedNode:
    """A node whose children are positions in the owning tree's node list."""

    value: int
    left: Optional[int] = None
    right: Optional[int] = None


@dataclass
class IndexedTree:
    """Binary search tree stored in a flat list; the root is at position 0."""

    nodes: list[IndexedNode] = field(default_factory=list)

    def add(self, value: int) -> IndexedNode:
        """Append a node for ``value``, link it into the tree and return it."""
        index = len(self.nodes)
        node = IndexedNode(value)
        self.nodes.append(node)
        if index == 0:
            return node
        current = self.nodes[0]
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = index
                    return node
                current = self.nodes[current.right]
            else:
                if current.left is None:
                    current.left = index
                    return node
                current = self.nodes[current.left]

    def find(self, value: int) -> Optional[IndexedNode]:
        """Return the node holding ``value``, or None."""
        if not self.nodes:
            return None
        current = self.nodes[0]
        while current.value != value:
            next_index = current.right if value > current.value else current.left
            if next_index is None:
                return None
            current = self.nodes[next_index]
        return current

    def children(
        self, node: IndexedNode
    ) -> tuple[Optional[IndexedNode], Optional[IndexedNode]]:
        """Return the left and right child nodes of ``node``."""
        left = None if node.left is None else self.nodes[node.left]
        right = None if node.right is None else self.nodes[node.right]
        return left, right