"""Bounded buffers, a growable array, stacks and queues."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algokit.linked_lists import LinkedList

DEFAULT_CAPACITY = 4


def collect_until_sentinel(
    values: Iterable[Any], limit: Optional[int] = None, sentinel: Any = -1
) -> list[Any]:
    """Take ``values`` until ``sentinel`` appears or ``limit`` items are taken."""
    collected: list[Any] = []
    if limit is not None and limit <= 0:
        return collected
    for value in values:
        if value == sentinel:
            break
        collected.append(value)
        if limit is not None and len(collected) >= limit:
            break
    return collected


def format_elements(items: Iterable[Any]) -> str:
    """Render items as ``arr[i] = value`` lines."""
    return "\n".join(f"arr[{index}] = {value}" for index, value in enumerate(items))


def _check_index(index: int, count: int) -> int:
    if index < 0:
        index += count
    if not 0 <= index < count:
        raise IndexError("index out of range")
    return index


class FixedBuffer:
    """A buffer that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def append(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("buffer is full")
        self._items.append(value)

    def __getitem__(self, index: int) -> Any:
        return self._items[_check_index(index, len(self._items))]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class DynamicArray:
    """An array that doubles its capacity whenever it runs out of room."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._storage: list[Any] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def append(self, value: Any) -> None:
        if self._count >= self.capacity:
            new_capacity = self.capacity * 2 if self.capacity else DEFAULT_CAPACITY
            self._storage.extend([None] * (new_capacity - self.capacity))
        self._storage[self._count] = value
        self._count += 1

    def __getitem__(self, index: int) -> Any:
        return self._storage[_check_index(index, self._count)]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage[: self._count])


class ArrayStack:
    """A last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __getitem__(self, index: int) -> Any:
        """Item at ``index`` counted from the bottom of the stack."""
        return self._items[_check_index(index, len(self._items))]

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _StackNode:
    value: Any
    next: Optional[_StackNode]


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_StackNode] = None

    def push(self, value: Any) -> None:
        self._top = _StackNode(value, self._top)

    def pop(self) -> Any:
        top = self._top
        if top is None:
            raise IndexError("pop from empty stack")
        self._top = top.next
        return top.value

    def is_empty(self) -> bool:
        return self._top is None


class LinkedQueue:
    """An unbounded first-in first-out queue backed by a linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def enqueue(self, value: Any) -> None:
        self._list.add_to_end(value)

    def dequeue(self) -> Any:
        if self._list.is_empty():
            raise IndexError("dequeue from empty queue")
        return self._list.remove_from_start()

    def is_empty(self) -> bool:
        return self._list.is_empty()


class RingBufferQueue:
    """A bounded first-in first-out queue stored in a circular buffer."""

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buffer: list[Any] = [None] * capacity
        self._count = 0
        self._write = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def enqueue(self, value: Any) -> None:
        if self._count >= self.capacity:
            raise OverflowError("queue is full")
        self._buffer[self._write] = value
        self._write = (self._write + 1) % self.capacity
        self._count += 1

    def dequeue(self) -> Any:
        if self._count == 0:
            raise IndexError("dequeue from empty queue")
        oldest = (self._write - self._count) % self.capacity
        value = self._buffer[oldest]
        self._buffer[oldest] = None
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count