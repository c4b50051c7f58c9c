"""
Validation dispatch: checking values against a constraint sequence.

Three granularities, all short-circuiting on the first failure:
  - check_value:  one value, constraints in order
  - check_values: a row/column, elements in index order
  - check_grid:   a whole grid, rows in order then elements within each row

Each raises ConstraintViolation for the first failing (element, constraint)
pair and returns None when everything passes.
"""

from typing import Iterable, Sequence

from cmatrix.constraints.builder import Constraint
from cmatrix.core.errors import ConstraintViolation
from cmatrix.core.grid_types import Grid


def check_value(value: int, constraints: Sequence[Constraint]) -> None:
    """
    Validate a single value against every constraint.

    Args:
        value: Candidate element
        constraints: Constraints that must all hold

    Raises:
        ConstraintViolation: On the first constraint value fails
    """
    for c in constraints:
        if not c.check(value):
            raise ConstraintViolation(value=int(value), constraint=c)


def check_values(values: Iterable[int], constraints: Sequence[Constraint]) -> None:
    """
    Validate a row or column, element by element in index order.

    The violation's position is the flat index of the failing element.
    """
    if not constraints:
        return
    for i, value in enumerate(values):
        try:
            check_value(value, constraints)
        except ConstraintViolation as e:
            e.position = i
            raise


def check_grid(grid: Grid, constraints: Sequence[Constraint]) -> None:
    """
    Validate a whole grid, row-major.

    The violation's position is the (row, col) pair of the failing element.
    """
    if not constraints:
        return
    for r, row in enumerate(grid):
        try:
            check_values(row, constraints)
        except ConstraintViolation as e:
            e.position = (r, e.position)
            raise
