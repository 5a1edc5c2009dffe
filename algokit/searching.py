"""Linear and binary search over sequences, plus a quadratic sum of products."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


def linear_search(items: Iterable[int], target: int) -> Optional[int]:
    """Return the index of the first element equal to ``target``, or None."""
    for index, element in enumerate(items):
        if element == target:
            return index
    return None


def binary_search(items: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (high - low) // 2 + low
        element = items[middle]
        if target > element:
            low = middle + 1
        elif target < element:
            high = middle - 1
        else:
            return middle
    return None


def some_product(items: Iterable[int]) -> int:
    """Return the sum of ``a * b`` over every ordered pair of elements."""
    values = list(items)
    return sum(a * b for a in values for b in values)