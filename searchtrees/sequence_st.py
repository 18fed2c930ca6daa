"""A symbol table backed by a singly linked list with sequential lookup."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    key: Any
    value: Any
    next: Optional["_Node"] = None


class SequenceST:
    """Unordered symbol table; new keys are placed at the head of the list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, key: Any) -> Optional[_Node]:
        return next((node for node in self._nodes() if node.key == key), None)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield keys from the most recently added to the oldest."""
        return (node.key for node in self._nodes())

    def is_empty(self) -> bool:
        return self._count == 0

    def insert(self, key: Any, value: Any) -> None:
        """Set ``key`` to ``value``, adding a new entry at the head if needed."""
        node = self._find(key)
        if node is not None:
            node.value = value
            return
        self._head = _Node(key, value, self._head)
        self._count += 1

    def search(self, key: Any) -> Any:
        """Return the value stored for ``key``, or None if it is absent."""
        node = self._find(key)
        return None if node is None else node.value

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; removing a missing key does nothing."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                self._count -= 1
                return
            prev = node