"""
Exception taxonomy for the constrained matrix container.

Every failure a Matrix reports is a MatrixError carrying exactly one
ErrorKind. The human-readable message is derived from the kind when the
error is raised; callers can branch on either the subclass or `kind`.

  ConstraintViolation  - a value fails a registered constraint
  InvalidSize          - a supplied row/column/grid has the wrong length
  OutOfRange           - an index falls outside [0, num_rows) / [0, num_columns)
"""

from typing import Any, Literal, Optional


ErrorKind = Literal["constraint_violation", "invalid_size", "out_of_range"]


def error_message(kind: ErrorKind) -> str:
    """Return the fixed description for an error kind."""
    if kind == "constraint_violation":
        return "One or more elements of matrix violate constraints."
    elif kind == "invalid_size":
        return "All rows in matrix must have the same size."
    elif kind == "out_of_range":
        return "Index is out of range when requested row/column data."
    raise AssertionError(f"Unknown error kind: {kind!r}")


class MatrixError(Exception):
    """Base class for all errors raised by Matrix operations."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind):
        self.kind = kind
        super().__init__(error_message(kind))


class ConstraintViolation(MatrixError):
    """
    Raised when a value fails one of the matrix constraints.

    Attributes:
        value: The offending value (None if not known)
        constraint: The first constraint it failed (None if not known)
        position: Where the value sits in the checked data: a flat index
                  for rows/columns, a (row, col) pair for whole grids,
                  None for a single value
    """

    def __init__(
        self,
        value: Optional[int] = None,
        constraint: Any = None,
        position: Any = None,
    ):
        super().__init__("constraint_violation")
        self.value = value
        self.constraint = constraint
        self.position = position


class InvalidSize(MatrixError):
    """Raised when a row, column or grid has the wrong length."""

    def __init__(self):
        super().__init__("invalid_size")


class OutOfRange(MatrixError):
    """Raised when a row or column index is outside the matrix."""

    def __init__(self, index: Any = None, limit: Optional[int] = None):
        super().__init__("out_of_range")
        self.index = index
        self.limit = limit
