"""Multidimensional arrays: nested (Iliffe) vectors and flat linear storage."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import prod
from typing import Any


def compute_total_size(dimensions: Sequence[int]) -> int:
    """Number of elements in an array with the given dimension sizes."""
    return prod(dimensions)


def iterate_indices(dimensions: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every index tuple, with the first index changing fastest."""
    sizes = list(dimensions)
    if any(size <= 0 for size in sizes):
        return
    indices = [0] * len(sizes)
    while True:
        yield tuple(indices)
        for position, size in enumerate(sizes):
            indices[position] += 1
            if indices[position] == size:
                indices[position] = 0
            else:
                break
        else:
            return


def _normalize(indices: Any) -> tuple[int, ...]:
    return tuple(indices) if isinstance(indices, (tuple, list)) else (indices,)


def _validate(dimensions: tuple[int, ...], indices: tuple[int, ...]) -> None:
    if len(indices) != len(dimensions):
        raise IndexError(
            f"expected {len(dimensions)} indices, got {len(indices)}"
        )
    for index, size in zip(indices, dimensions):
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for size {size}")


class IliffeArray:
    """Array of nested lists, filled with 0, 1, 2, ... in row-major order."""

    def __init__(self, dimensions: Sequence[int]):
        self.dimensions = tuple(dimensions)
        if not self.dimensions:
            raise ValueError("at least one dimension is required")
        if any(size < 0 for size in self.dimensions):
            raise ValueError("dimension sizes must not be negative")
        counter = iter(range(compute_total_size(self.dimensions)))

        def build(level: int) -> list[Any]:
            size = self.dimensions[level]
            if level == len(self.dimensions) - 1:
                return [next(counter) for _ in range(size)]
            return [build(level + 1) for _ in range(size)]

        self._data = build(0)

    def _row(self, indices: tuple[int, ...]) -> list[Any]:
        _validate(self.dimensions, indices)
        row = self._data
        for index in indices[:-1]:
            row = row[index]
        return row

    def __getitem__(self, indices: Any) -> Any:
        key = _normalize(indices)
        return self._row(key)[key[-1]]

    def __setitem__(self, indices: Any, value: Any) -> None:
        key = _normalize(indices)
        self._row(key)[key[-1]] = value


class LinearArray:
    """Array stored in one flat list, in row- or column-major order."""

    def __init__(self, dimensions: Sequence[int], column_major: bool = False):
        self.dimensions = tuple(dimensions)
        if any(size < 0 for size in self.dimensions):
            raise ValueError("dimension sizes must not be negative")
        self.column_major = column_major
        self.data: list[Any] = [0] * compute_total_size(self.dimensions)

    def linear_index(self, indices: Any) -> int:
        """Position in ``data`` of the element at ``indices``."""
        key = _normalize(indices)
        _validate(self.dimensions, key)
        if not key:
            return 0
        pairs = list(zip(key, self.dimensions))
        if self.column_major:
            pairs.reverse()
        index = 0
        for position, size in pairs:
            index = index * size + position
        return index

    def __getitem__(self, indices: Any) -> Any:
        return self.data[self.linear_index(indices)]

    def __setitem__(self, indices: Any, value: Any) -> None:
        self.data[self.linear_index(indices)] = value