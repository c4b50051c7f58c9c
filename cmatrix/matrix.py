"""
Fixed-shape integer matrix with continuously validated elements.

A Matrix owns a (num_rows, num_columns) int grid and a tuple of
constraints fixed at construction. It keeps two invariants after every
public operation that returns normally:

  1. The grid is rectangular: exactly num_rows rows of num_columns elements.
  2. Every stored element satisfies every constraint.

The only mutations are whole-row and whole-column replacement. Each one
checks the index, then the length, then the constraints, and writes
nothing unless all three pass, so a failed call leaves the matrix exactly
as it was.

Not thread-safe: callers that share a Matrix across threads must
serialize access themselves.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from cmatrix.constraints.builder import Constraint
from cmatrix.constraints.validation import check_grid, check_value, check_values
from cmatrix.core.errors import ConstraintViolation, InvalidSize, OutOfRange
from cmatrix.core.grid_types import (
    DEFAULT_FILL_VALUE,
    GRID_DTYPE,
    Grid,
    GridLike,
    Row,
    RowLike,
    format_grid,
    to_grid,
    to_row,
)


# Logger for this module
logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _freeze_constraints(constraints: Iterable[Constraint]) -> Tuple[Constraint, ...]:
    frozen = tuple(constraints)
    for c in frozen:
        assert isinstance(c, Constraint), \
            f"Expected Constraint, got {type(c).__name__}"
    return frozen


class Matrix:
    """
    Rectangular int container whose elements always satisfy its constraints.

    Construct by size and fill value:

        >>> from cmatrix.constraints.builder import between
        >>> m = Matrix(2, 2, fill_with=5, constraints=between(0, 9))
        >>> m.get_row(0).tolist()
        [5, 5]

    or from existing rows with Matrix.from_grid.

    Attributes:
        num_rows: Number of rows (fixed)
        num_columns: Number of columns (fixed)
        constraints: Tuple of Constraint objects (fixed)
    """

    def __init__(
        self,
        num_rows: int = 0,
        num_columns: int = 0,
        fill_with: int = DEFAULT_FILL_VALUE,
        constraints: Iterable[Constraint] = (),
    ):
        """
        Build a num_rows x num_columns matrix with every cell set to fill_with.

        fill_with is validated before any storage is allocated.

        Args:
            num_rows: Row count, >= 0
            num_columns: Column count, >= 0
            fill_with: Initial value of every cell
            constraints: Constraints every element must satisfy

        Raises:
            InvalidSize: If a dimension is negative
            ConstraintViolation: If fill_with fails any constraint
            TypeError: If a dimension or fill_with is not an integer, or
                       fill_with does not fit GRID_DTYPE
        """
        if not (_is_int(num_rows) and _is_int(num_columns)):
            raise TypeError(
                f"Matrix dimensions must be integers, got ({num_rows!r}, {num_columns!r})"
            )
        if not _is_int(fill_with):
            raise TypeError(f"fill_with must be an integer, got {fill_with!r}")
        limits = np.iinfo(GRID_DTYPE)
        if not limits.min <= fill_with <= limits.max:
            raise TypeError(
                f"fill_with must fit {np.dtype(GRID_DTYPE)}, got {fill_with!r}"
            )
        if num_rows < 0 or num_columns < 0:
            raise InvalidSize()

        self._constraints = _freeze_constraints(constraints)
        try:
            check_value(fill_with, self._constraints)
        except ConstraintViolation:
            logger.debug("Rejected fill value %r for %dx%d matrix", fill_with, num_rows, num_columns)
            raise

        self._grid = np.full((int(num_rows), int(num_columns)), fill_with, dtype=GRID_DTYPE)
        logger.debug("Created %r filled with %d", self, fill_with)

    @classmethod
    def from_grid(
        cls,
        data: GridLike,
        constraints: Iterable[Constraint] = (),
    ) -> Matrix:
        """
        Build a matrix from a rectangular sequence of rows.

        The column count is the first row's length (0 for empty data).
        Every element is validated against constraints, rows in order, so
        both construction paths give the same guarantee.

        Args:
            data: Rows as nested sequences or a 2-D integer numpy array.
                  The matrix keeps its own copy.
            constraints: Constraints every element must satisfy

        Returns:
            New Matrix holding a copy of data

        Raises:
            InvalidSize: If the rows are not all the same length
            ConstraintViolation: If any element fails any constraint

        Example:
            >>> m = Matrix.from_grid([[1, 2], [3, 4]])
            >>> m.get_column(1).tolist()
            [2, 4]
        """
        grid = to_grid(data)
        frozen = _freeze_constraints(constraints)
        try:
            check_grid(grid, frozen)
        except ConstraintViolation:
            logger.debug("Rejected %dx%d grid for new matrix", *grid.shape)
            raise

        return cls._from_checked(grid, frozen)

    @classmethod
    def _from_checked(cls, grid: Grid, constraints: Tuple[Constraint, ...]) -> Matrix:
        # Skips validation: grid must already be owned and satisfy constraints
        m = cls.__new__(cls)
        m._grid = grid
        m._constraints = constraints
        logger.debug("Created %r from grid", m)
        return m

    # ------------------------------------------------------------------
    # Shape and constraints
    # ------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        return self._grid.shape[0]

    @property
    def num_columns(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.num_rows, self.num_columns)

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    # ------------------------------------------------------------------
    # Row / column access
    # ------------------------------------------------------------------

    def _check_index(self, index: Any, limit: int) -> int:
        if not _is_int(index) or not 0 <= index < limit:
            logger.debug("Index %r outside [0, %d) on %r", index, limit, self)
            raise OutOfRange(index=index, limit=limit)
        return int(index)

    def _check_length(self, values: RowLike, expected: int) -> Row:
        row = to_row(values)
        if row.shape[0] != expected:
            logger.debug("Got %d values, expected %d on %r", row.shape[0], expected, self)
            raise InvalidSize()
        return row

    def get_row(self, index: int) -> Row:
        """
        Return row `index` as a read-only view.

        The view reflects later writes to the matrix. Copy it (np.array or
        .tolist()) to keep a snapshot.

        Raises:
            OutOfRange: If index is not in [0, num_rows)
        """
        r = self._check_index(index, self.num_rows)
        view = self._grid[r]
        view.flags.writeable = False
        return view

    def set_row(self, index: int, values: RowLike) -> None:
        """
        Replace row `index` with values.

        Checks, in order: the index, the length (must be num_columns), then
        every element against every constraint. Nothing is written unless
        all checks pass.

        Raises:
            OutOfRange: If index is not in [0, num_rows)
            InvalidSize: If len(values) != num_columns
            ConstraintViolation: If any element fails any constraint
        """
        r = self._check_index(index, self.num_rows)
        row = self._check_length(values, self.num_columns)
        try:
            check_values(row, self._constraints)
        except ConstraintViolation:
            logger.debug("Rejected row %d for %r: %s", r, self, row.tolist())
            raise

        self._grid[r, :] = row
        logger.debug("Replaced row %d of %r", r, self)

    def get_column(self, index: int) -> Row:
        """
        Return column `index` as an independent copy, one element per row.

        Raises:
            OutOfRange: If index is not in [0, num_columns)
        """
        c = self._check_index(index, self.num_columns)
        return self._grid[:, c].copy()

    def set_column(self, index: int, values: RowLike) -> None:
        """
        Replace column `index` with values, row by row.

        Same check order and all-or-nothing behaviour as set_row, with the
        length checked against num_rows.

        Raises:
            OutOfRange: If index is not in [0, num_columns)
            InvalidSize: If len(values) != num_rows
            ConstraintViolation: If any element fails any constraint
        """
        c = self._check_index(index, self.num_columns)
        column = self._check_length(values, self.num_rows)
        try:
            check_values(column, self._constraints)
        except ConstraintViolation:
            logger.debug("Rejected column %d for %r: %s", c, self, column.tolist())
            raise

        self._grid[:, c] = column
        logger.debug("Replaced column %d of %r", c, self)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def to_list(self) -> List[List[int]]:
        """Nested-list snapshot of the whole matrix, row-major."""
        return self._grid.tolist()

    def copy(self) -> Matrix:
        """Independent matrix with the same shape, data and constraints."""
        return type(self)._from_checked(self._grid.copy(), self._constraints)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict] = None) -> Matrix:
        return type(self)._from_checked(
            self._grid.copy(), copy.deepcopy(self._constraints, memo)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._constraints == other._constraints
            and bool(np.array_equal(self._grid, other._grid))
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Matrix({self.num_rows}x{self.num_columns}, "
            f"{len(self._constraints)} constraints)"
        )

    def __str__(self) -> str:
        return format_grid(self._grid)


if __name__ == "__main__":
    # Self-test: the concrete scenarios
    from cmatrix.constraints.builder import between

    m = Matrix(2, 2, fill_with=5, constraints=between(0, 9))
    assert m.get_row(0).tolist() == [5, 5]
    try:
        m.set_row(0, [1, 10])
        raise AssertionError("Expected ConstraintViolation")
    except ConstraintViolation:
        pass
    assert m.get_row(0).tolist() == [5, 5]
    print(m)

    m2 = Matrix.from_grid([[1, 2], [3, 4]])
    m2.set_column(1, [20, 40])
    assert m2.to_list() == [[1, 20], [3, 40]]
    print(m2)

    print("matrix.py self-test passed.")
