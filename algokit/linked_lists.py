"""Singly and doubly linked lists with explicit node handles."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional[ListNode] = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with fast access to both ends."""

    def __init__(self) -> None:
        self.first: Optional[ListNode] = None
        self.last: Optional[ListNode] = None
        self._count = 0

    def add_to_start(self, value: Any) -> ListNode:
        """Insert ``value`` at the front and return its node."""
        node = ListNode(value, self.first)
        self.first = node
        if self.last is None:
            self.last = node
        self._count += 1
        return node

    def add_to_end(self, value: Any) -> ListNode:
        """Append ``value`` at the back and return its node."""
        node = ListNode(value)
        if self.last is not None:
            self.last.next = node
        self.last = node
        if self.first is None:
            self.first = node
        self._count += 1
        return node

    def remove_from_start(self) -> Any:
        """Remove the first node and return its value."""
        first = self.first
        if first is None:
            raise IndexError("remove from empty list")
        if first is self.last:
            self.last = None
        self.first = first.next
        first.next = None
        self._count -= 1
        return first.value

    def remove_after(self, node: ListNode) -> Any:
        """Remove the node following ``node`` and return its value."""
        doomed = node.next
        if doomed is None:
            raise ValueError("node has no successor")
        node.next = doomed.next
        if doomed is self.last:
            self.last = node
        doomed.next = None
        self._count -= 1
        return doomed.value

    def is_empty(self) -> bool:
        return self.first is None

    def __iter__(self) -> Iterator[Any]:
        node = self.first
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._count


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    value: Any
    next: Optional[DoublyNode] = field(default=None, repr=False)
    previous: Optional[DoublyNode] = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list supporting removal of any node in constant time."""

    def __init__(self) -> None:
        self.first: Optional[DoublyNode] = None
        self.last: Optional[DoublyNode] = None
        self._count = 0

    def append(self, value: Any) -> DoublyNode:
        """Append ``value`` at the back and return its node."""
        node = DoublyNode(value, previous=self.last)
        if self.last is not None:
            self.last.next = node
        self.last = node
        if self.first is None:
            self.first = node
        self._count += 1
        return node

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self.first is None:
            raise IndexError("pop from empty list")
        return self.remove(self.first)

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.last is None:
            raise IndexError("pop from empty list")
        return self.remove(self.last)

    def remove(self, node: DoublyNode) -> Any:
        """Unlink ``node`` from this list and return its value."""
        if (node.next is None and node is not self.last) or (
            node.previous is None and node is not self.first
        ):
            raise ValueError("node does not belong to this list")
        following, preceding = node.next, node.previous
        if following is not None:
            following.previous = preceding
        else:
            self.last = preceding
        if preceding is not None:
            preceding.next = following
        else:
            self.first = following
        node.next = node.previous = None
        self._count -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self.first
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.last
        while node is not None:
            yield node.value
            node = node.previous

    def __len__(self) -> int:
        return self._count