import pytest

from algokit.multiarray import (
    IliffeArray,
    LinearArray,
    compute_total_size,
    iterate_indices,
)


def test_total_size():
    assert compute_total_size([3, 4, 5]) == 60
    assert compute_total_size([]) == 1


def test_iterate_first_index_fastest():
    indices = list(iterate_indices([3, 4, 5]))
    assert indices[:4] == [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0)]
    assert len(indices) == compute_total_size([3, 4, 5])
    assert len(set(indices)) == len(indices)
    assert indices[-1] == (2, 3, 4)


def test_iterate_zero_dimension_yields_nothing():
    assert list(iterate_indices([3, 0])) == []


def test_iliffe_worked_example():
    arr = IliffeArray([3, 4, 5])
    assert arr[1, 0, 4] == 24
    assert arr[0, 0, 0] == 0


def test_iliffe_matches_row_major_linear_layout():
    dims = (3, 4, 5)
    nested = IliffeArray(dims)
    flat = LinearArray(dims)
    for index in iterate_indices(dims):
        assert nested[index] == flat.linear_index(index)


def test_iliffe_set_and_get():
    arr = IliffeArray([2, 2])
    arr[1, 1] = "x"
    assert arr[1, 1] == "x"
    assert arr[0, 1] == 1


def test_iliffe_index_errors():
    arr = IliffeArray([3, 4, 5])
    assert arr[2, 3, 4] == 59
    with pytest.raises(IndexError):
        arr[3, 0, 0]
    with pytest.raises(IndexError):
        arr[0, 0]


def test_iliffe_requires_dimensions():
    with pytest.raises(ValueError):
        IliffeArray([])


def test_linear_row_major_covers_every_slot():
    dims = (3, 4, 5)
    arr = LinearArray(dims)
    positions = [arr.linear_index(i) for i in iterate_indices(dims)]
    assert sorted(positions) == list(range(compute_total_size(dims)))


def test_linear_column_major_is_sequential_in_iteration_order():
    dims = (3, 4, 5)
    arr = LinearArray(dims, column_major=True)
    positions = [arr.linear_index(i) for i in iterate_indices(dims)]
    assert positions == list(range(compute_total_size(dims)))


def test_linear_set_get_roundtrip():
    arr = LinearArray((2, 3))
    for i, index in enumerate(iterate_indices((2, 3))):
        arr[index] = i * 10
    for i, index in enumerate(iterate_indices((2, 3))):
        assert arr[index] == i * 10
    assert arr[0, 0] == arr.data[0]


def test_linear_index_errors():
    arr = LinearArray((2, 3))
    with pytest.raises(IndexError):
        arr[2, 0]
    with pytest.raises(IndexError):
        arr.linear_index((0, 0, 0))