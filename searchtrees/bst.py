"""An unbalanced binary search tree mapping ordered keys to values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    key: Any
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _detach_min(subtree: _Node) -> tuple[_Node, Optional[_Node]]:
    """Unlink the smallest node of ``subtree``; return it and the new subtree root."""
    parent: Optional[_Node] = None
    node = subtree
    while node.left is not None:
        parent, node = node, node.left
    if parent is None:
        return node, node.right
    parent.left = node.right
    return node, subtree


def _detach_max(subtree: _Node) -> tuple[_Node, Optional[_Node]]:
    """Unlink the largest node of ``subtree``; return it and the new subtree root."""
    parent: Optional[_Node] = None
    node = subtree
    while node.right is not None:
        parent, node = node, node.right
    if parent is None:
        return node, node.left
    parent.right = node.left
    return node, subtree


class BST:
    """Binary search tree; inserting an existing key replaces its value."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def is_empty(self) -> bool:
        return self._count == 0

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        if self._root is None:
            self._root = _Node(key, value)
            self._count += 1
            return
        node = self._root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    self._count += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, value)
                    self._count += 1
                    return
                node = node.right

    def search(self, key: Any) -> Any:
        """Return the value stored for ``key``, or None if it is absent."""
        node = self._find(key)
        return None if node is None else node.value

    def pre_order(self) -> Iterator[Any]:
        """Yield keys node first, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def post_order(self) -> Iterator[Any]:
        """Yield keys of both subtrees before the node itself."""
        if self._root is None:
            return
        stack = [self._root]
        reversed_keys: list[Any] = []
        while stack:
            node = stack.pop()
            reversed_keys.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_keys)

    def level_order(self) -> Iterator[Any]:
        """Yield keys breadth first, left to right within each level."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.key
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _require_nonempty(self) -> _Node:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError if the tree is empty."""
        node = self._require_nonempty()
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """Return the largest key; raise ValueError if the tree is empty."""
        node = self._require_nonempty()
        while node.right is not None:
            node = node.right
        return node.key

    def remove_min(self) -> None:
        """Remove the smallest key; raise ValueError if the tree is empty."""
        root = self._require_nonempty()
        _, self._root = _detach_min(root)
        self._count -= 1

    def remove_max(self) -> None:
        """Remove the largest key; raise ValueError if the tree is empty."""
        root = self._require_nonempty()
        _, self._root = _detach_max(root)
        self._count -= 1

    def remove(self, key: Any) -> None:
        """Remove ``key`` using Hibbard deletion; a missing key is ignored."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor, rest = _detach_min(node.right)
            successor.right = rest
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1