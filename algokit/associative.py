"""Hash maps with string keys: separate chaining and linear probing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

HashFunc = Callable[[str], int]


def first_letter_hash(key: str) -> int:
    """Position of the key's first character relative to 'a'; 0 for ''."""
    if not key:
        return 0
    return ord(key[0]) - ord("a")


@dataclass
class _Entry:
    key: str
    value: Any


class ChainedHashMap:
    """Fixed number of buckets, each holding a chain of entries."""

    def __init__(self, hash_func: HashFunc = first_letter_hash, bucket_count: int = 64):
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self._hash_func = hash_func
        self._buckets: list[list[_Entry]] = [[] for _ in range(bucket_count)]
        self._count = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[self._hash_func(key) % len(self._buckets)]

    def _entry(self, key: str) -> Optional[_Entry]:
        return next((e for e in self._bucket(key) if e.key == key), None)

    def add_or_get(self, key: str, default: Any = None) -> tuple[Any, bool]:
        """Return ``(value, added)``; a new key is stored with ``default``."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                return entry.value, False
        bucket.append(_Entry(key, default))
        self._count += 1
        return default, True

    def __setitem__(self, key: str, value: Any) -> None:
        entry = self._entry(key)
        if entry is None:
            self._bucket(key).append(_Entry(key, value))
            self._count += 1
        else:
            entry.value = value

    def __getitem__(self, key: str) -> Any:
        entry = self._entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._entry(key) is not None

    def __len__(self) -> int:
        return self._count


class LinearProbingMap:
    """Open addressing with linear probing in a fixed-size table.

    ``add`` always takes the next free slot and does not replace an entry
    with the same key; lookups return the earliest one probed.
    """

    def __init__(self, hash_func: HashFunc = first_letter_hash, capacity: int = 8):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._hash_func = hash_func
        self._slots: list[Optional[tuple[str, Any]]] = [None] * capacity

    def _probe(self, key: str):
        capacity = len(self._slots)
        start = self._hash_func(key) % capacity
        for step in range(capacity):
            yield (start + step) % capacity

    def add(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` in the first free slot probed."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = (key, value)
                return
        raise OverflowError("map is full")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` if absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return default
            if slot[0] == key:
                return slot[1]
        return default

    def __getitem__(self, key: str) -> Any:
        missing = object()
        value = self.get(key, missing)
        if value is missing:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        missing = object()
        return self.get(key, missing) is not missing

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)