"""
Core grid types and utilities for the constrained matrix container.

This module defines the fundamental Grid representation used as backing
storage by Matrix, plus the coercion helpers that turn caller-supplied
rows and columns into that representation.

Grid: always shape (num_rows, num_columns), dtype=int
Row:  1-D integer array (one row or one column of a Grid)
"""

from typing import Sequence, TypeAlias, Union

import numpy as np

from cmatrix.core.errors import InvalidSize


# Type aliases for backing storage
Grid: TypeAlias = np.ndarray  # shape: (num_rows, num_columns), dtype: int
Row: TypeAlias = np.ndarray   # shape: (n,), dtype: int

# Anything a caller may hand us as a row/column or as a whole grid
RowLike: TypeAlias = Union[Sequence[int], np.ndarray]
GridLike: TypeAlias = Union[Sequence[Sequence[int]], np.ndarray]

# Defaults
DEFAULT_FILL_VALUE = 0
GRID_DTYPE = int


def _as_grid_dtype(arr: np.ndarray) -> np.ndarray:
    # Values that do not fit GRID_DTYPE are rejected rather than wrapped
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=GRID_DTYPE)
    if not np.issubdtype(arr.dtype, np.integer) or not np.can_cast(arr.dtype, GRID_DTYPE):
        raise TypeError(
            f"Matrix elements must be integers that fit {np.dtype(GRID_DTYPE)}, "
            f"got dtype={arr.dtype}"
        )
    return arr.astype(GRID_DTYPE, copy=True)


def _to_array(data, ndim: int) -> np.ndarray:
    try:
        arr = np.array(data)
    except ValueError:
        # numpy refuses inhomogeneous nesting
        raise InvalidSize() from None
    except OverflowError:
        raise TypeError(f"Matrix elements must fit {np.dtype(GRID_DTYPE)}") from None
    if arr.ndim != ndim:
        raise InvalidSize()
    return arr


def to_row(values: RowLike) -> Row:
    """
    Coerce a caller-supplied row or column into an owned 1-D int array.

    The result never shares memory with `values`.

    Args:
        values: Sequence of ints or 1-D integer numpy array

    Returns:
        Fresh 1-D array with dtype GRID_DTYPE

    Raises:
        InvalidSize: If values is not one-dimensional
        TypeError: If values holds non-integer data, or integers outside
                   the range of GRID_DTYPE
    """
    return _as_grid_dtype(_to_array(values, ndim=1))


def to_grid(data: GridLike) -> Grid:
    """
    Coerce a rectangular sequence of rows into an owned 2-D int array.

    Row lengths are compared against the first row before numpy sees the
    data, so a ragged input is reported as InvalidSize rather than as a
    numpy conversion error. An empty input yields a (0, 0) grid.

    Args:
        data: Sequence of rows, or a 2-D integer numpy array

    Returns:
        Fresh 2-D array with dtype GRID_DTYPE

    Raises:
        InvalidSize: If any row length differs from the first row's length,
                     or the rows are not flat sequences of ints
        TypeError: If data holds non-integer values, or integers outside
                   the range of GRID_DTYPE

    Example:
        >>> to_grid([[1, 2], [3, 4]]).shape
        (2, 2)
        >>> to_grid([]).shape
        (0, 0)
    """
    if isinstance(data, np.ndarray):
        return _as_grid_dtype(_to_array(data, ndim=2))

    rows = list(data)
    if not rows:
        return np.zeros((0, 0), dtype=GRID_DTYPE)

    num_columns = len(rows[0])
    for row in rows:
        if len(row) != num_columns:
            raise InvalidSize()

    return _as_grid_dtype(_to_array(rows, ndim=2))


def format_grid(grid: Grid) -> str:
    """
    Render a small ASCII representation of the grid for debugging.

    Each row is on its own line with space-separated integer values.

    Example:
        >>> print(format_grid(np.array([[0, 1], [2, 3]], dtype=int)))
        0 1
        2 3
    """
    assert grid.ndim == 2, f"Grid must be 2D, got {grid.ndim}D"

    return "\n".join(' '.join(str(int(val)) for val in row) for row in grid)


if __name__ == "__main__":
    # Self-test: coercion and ragged detection
    grid = to_grid([[0, 1], [2, 3]])
    print("Grid:")
    print(format_grid(grid))
    assert grid.shape == (2, 2)
    assert to_grid([]).shape == (0, 0)

    try:
        to_grid([[1, 2], [3]])
        raise AssertionError("Ragged grid should be rejected")
    except InvalidSize:
        pass

    print("grid_types self-test passed.")
