"""
Tests for grid coercion helpers.
"""

import numpy as np

from cmatrix.core.errors import InvalidSize
from cmatrix.core.grid_types import format_grid, to_grid, to_row


def test_to_grid_basic():
    grid = to_grid([[1, 2, 3], [4, 5, 6]])
    assert grid.shape == (2, 3)
    assert np.issubdtype(grid.dtype, np.integer)
    assert grid.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_to_grid_empty_shapes():
    assert to_grid([]).shape == (0, 0)
    assert to_grid([[], []]).shape == (2, 0)


def test_to_grid_ragged():
    for data in ([[1, 2], [3]], [[1], [2, 3]], [[], [1]]):
        try:
            to_grid(data)
            raise AssertionError(f"Should have raised InvalidSize for {data}")
        except InvalidSize:
            pass


def test_to_grid_copies_numpy_input():
    src = np.array([[1, 2], [3, 4]])
    grid = to_grid(src)
    src[0, 0] = 99
    assert grid[0, 0] == 1


def test_to_grid_rejects_non_integers():
    try:
        to_grid([[1.5, 2.0]])
        raise AssertionError("Should have raised TypeError for floats")
    except TypeError:
        pass


def test_integers_outside_int64_are_rejected_not_wrapped():
    """2**63 would wrap to -2**63 if cast unchecked."""
    for values in ([2**63], [1, 2**64 - 1], [2**70]):
        try:
            to_row(values)
            raise AssertionError(f"Should have raised TypeError for {values}")
        except TypeError:
            pass

        try:
            to_grid([values])
            raise AssertionError(f"Should have raised TypeError for {[values]}")
        except TypeError:
            pass

    try:
        to_grid(np.array([[2**63]], dtype=np.uint64))
        raise AssertionError("Should have raised TypeError for uint64 data")
    except TypeError:
        pass

    # Narrower integer dtypes still convert
    assert to_row(np.array([1, 2], dtype=np.int8)).tolist() == [1, 2]
    assert to_row([2**63 - 1, -(2**63)]).tolist() == [2**63 - 1, -(2**63)]


def test_to_grid_rejects_deeper_nesting():
    for data in ([[[1], [2]], [[3], [4]]], [[[1, 2]], [[3, 4]]], [[[1, 2]], [[3]]]):
        try:
            to_grid(data)
            raise AssertionError(f"Should have raised InvalidSize for {data}")
        except InvalidSize:
            pass

    try:
        to_grid(np.zeros((2, 2, 1), dtype=int))
        raise AssertionError("Should have raised InvalidSize for 3-D array")
    except InvalidSize:
        pass


def test_to_row():
    row = to_row((1, 2, 3))
    assert row.tolist() == [1, 2, 3]
    assert to_row([]).shape == (0,)

    try:
        to_row([[1, 2]])
        raise AssertionError("Should have raised InvalidSize for 2-D input")
    except InvalidSize:
        pass


def test_format_grid():
    assert format_grid(np.array([[0, 1], [2, 3]])) == "0 1\n2 3"


if __name__ == "__main__":
    test_to_grid_basic()
    test_to_grid_empty_shapes()
    test_to_grid_ragged()
    test_to_grid_copies_numpy_input()
    test_to_grid_rejects_non_integers()
    test_integers_outside_int64_are_rejected_not_wrapped()
    test_to_grid_rejects_deeper_nesting()
    test_to_row()
    test_format_grid()
    print("\n✓ ALL GRID TYPE TESTS PASSED")
