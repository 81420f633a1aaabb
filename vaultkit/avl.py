"""A self-balancing AVL binary search tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AVLNode:
    """A tree node holding one key/value pair."""

    key: Any
    value: Any
    height: int = 1
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node else 0


def _balance(node: Optional[AVLNode]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    if pivot is None:
        return node
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    if pivot is None:
        return node
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    bf = _balance(node)
    if bf > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if bf < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """AVL tree ordered by ``key_func(key)``; equal keys are kept side by side."""

    def __init__(self, key_func: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key_func or (lambda key: key)
        self.root: Optional[AVLNode] = None

    def insert(self, key: Any, value: Any = None) -> None:
        """Insert a key/value pair; a duplicate key is added, not replaced."""
        self.root = self._insert(self.root, key, value)

    def _insert(self, node: Optional[AVLNode], key: Any, value: Any) -> AVLNode:
        if node is None:
            return AVLNode(key, value)
        if self._key(key) < self._key(node.key):
            node.left = self._insert(node.left, key, value)
        else:
            node.right = self._insert(node.right, key, value)
        return _rebalance(node)

    def remove(self, key: Any) -> None:
        """Remove one entry with ``key``; raise KeyError if there is none."""
        self.root = self._remove(self.root, key)

    def _remove(self, node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
        if node is None:
            raise KeyError(key)
        target, here = self._key(key), self._key(node.key)
        if target < here:
            node.left = self._remove(node.left, key)
        elif here < target:
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right = self._remove_smallest(node.right)
        return _rebalance(node)

    def _remove_smallest(self, node: AVLNode) -> Optional[AVLNode]:
        if node.left is None:
            return node.right
        node.left = self._remove_smallest(node.left)
        return _rebalance(node)

    def _find(self, key: Any) -> Optional[AVLNode]:
        target = self._key(key)
        node = self.root
        while node is not None:
            here = self._key(node.key)
            if target < here:
                node = node.left
            elif here < target:
                node = node.right
            else:
                return node
        return None

    def get(self, key: Any) -> Any:
        """Return the value stored with ``key``; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def height(self) -> int:
        """Return the height of the tree (0 when empty)."""
        return _height(self.root)

    def inorder(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""

        def walk(node: Optional[AVLNode]) -> Iterator[tuple[Any, Any]]:
            if node:
                yield from walk(node.left)
                yield node.key, node.value
                yield from walk(node.right)

        return walk(self.root)

    def preorder(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node before its children."""

        def walk(node: Optional[AVLNode]) -> Iterator[tuple[Any, Any]]:
            if node:
                yield node.key, node.value
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self.root)

    def postorder(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node after its children."""

        def walk(node: Optional[AVLNode]) -> Iterator[tuple[Any, Any]]:
            if node:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.key, node.value

        return walk(self.root)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None