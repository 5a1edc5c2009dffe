"""Classic comparison sorts working on mutable sequences of comparable items."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import pairwise
from typing import Any, Optional


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True if ``items`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by moving the largest remaining item to the end."""
    for end in range(len(items) - 1, 0, -1):
        index_of_max = 0
        for index in range(1, end + 1):
            if items[index] > items[index_of_max]:
                index_of_max = index
        _swap(items, index_of_max, end)


def selection_sort_min(items: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining item to the front."""
    for start in range(len(items) - 1):
        index_of_min = start
        for index in range(start + 1, len(items)):
            if items[index] < items[index_of_min]:
                index_of_min = index
        _swap(items, index_of_min, start)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort in place, shifting larger items right while inserting each one."""
    for sorted_count in range(len(items)):
        value = items[sorted_count]
        position = sorted_count
        while position >= 1 and items[position - 1] > value:
            items[position] = items[position - 1]
            position -= 1
        items[position] = value


def insertion_sort_two_steps(items: MutableSequence[Any]) -> None:
    """Sort in place: find the insertion point first, then shift and insert."""
    for sorted_count in range(len(items)):
        added = items[sorted_count]
        target = next(
            (i for i in range(sorted_count, 0, -1) if items[i - 1] < added), 0
        )
        items[target + 1 : sorted_count + 1] = items[target:sorted_count]
        items[target] = added


def _bubble_pass(items: MutableSequence[Any], size: int) -> None:
    for index in range(size - 1):
        if items[index] > items[index + 1]:
            _swap(items, index, index + 1)


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by repeatedly bubbling the largest item to the end."""
    for size in range(len(items), 1, -1):
        _bubble_pass(items, size)


def bubble_sort_recursive(items: MutableSequence[Any]) -> None:
    """Bubble sort where each pass recurses on the unsorted prefix."""

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        _bubble_pass(items, size)
        sort_prefix(size - 1)

    sort_prefix(len(items))


def merge_sort(items: Sequence[Any]) -> list[Any]:
    """Return a new sorted list; ``items`` is left untouched."""
    if len(items) <= 1:
        return list(items)
    half = len(items) // 2
    left = merge_sort(items[:half])
    right = merge_sort(items[half:])

    result: list[Any] = []
    left_index = right_index = 0
    while left_index < len(left) and right_index < len(right):
        if left[left_index] < right[right_index]:
            result.append(left[left_index])
            left_index += 1
        else:
            result.append(right[right_index])
            right_index += 1
    result.extend(left[left_index:])
    result.extend(right[right_index:])
    return result


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high]`` around its first item; return its final index."""
    pivot = items[low]
    less_count = low
    for index in range(low + 1, high):
        if items[index] < pivot:
            less_count += 1
            _swap(items, index, less_count)
    _swap(items, low, less_count)
    return less_count


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort in place using the first item of each range as the pivot."""

    def sort_range(low: int, high: int) -> None:
        while high - low > 1:
            pivot = _partition(items, low, high)
            # Recurse into the smaller side to keep the stack shallow.
            if pivot - low < high - pivot - 1:
                sort_range(low, pivot)
                low = pivot + 1
            else:
                sort_range(pivot + 1, high)
                high = pivot

    sort_range(0, len(items))


def heapify(items: MutableSequence[Any], parent: int, size: Optional[int] = None) -> None:
    """Sift ``items[parent]`` down within the max-heap ``items[:size]``."""
    if size is None:
        size = len(items)
    while True:
        largest = parent
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < size and items[largest] < items[child]:
                largest = child
        if largest == parent:
            return
        _swap(items, largest, parent)
        parent = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by building a max-heap and extracting the root repeatedly."""
    size = len(items)
    for parent in range(size // 2, -1, -1):
        heapify(items, parent, size)
    for last in range(size - 1, 0, -1):
        _swap(items, 0, last)
        heapify(items, 0, last)