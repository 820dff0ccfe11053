"""An unbalanced binary search tree of integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class BSTNode:
    """One node of a binary search tree."""

    key: int
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, key: int) -> bool:
        """Insert a key; return False if it was already present."""
        if self.root is None:
            self.root = BSTNode(key)
            return True
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = BSTNode(key)
                    return True
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = BSTNode(key)
                    return True
                node = node.right
            else:
                return False

    def delete(self, key: int) -> bool:
        """Remove a key; return False if it was not present.

        A node with two children takes its in-order successor's key.
        """
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.key = successor.key
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def search(self, key: int) -> bool:
        """Return whether the key is in the tree."""
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def find_min(self) -> int:
        """Return the smallest key; ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def inorder(self) -> Iterator[int]:
        """Yield keys left subtree, node, right subtree."""
        pending: list[BSTNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def preorder(self) -> Iterator[int]:
        """Yield keys node, left subtree, right subtree."""
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node.key
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def postorder(self) -> Iterator[int]:
        """Yield keys left subtree, right subtree, node."""
        pending = [self.root] if self.root is not None else []
        reversed_keys: list[int] = []
        while pending:
            node = pending.pop()
            reversed_keys.append(node.key)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(reversed_keys)

    def clear(self) -> None:
        """Drop every node."""
        self.root = None