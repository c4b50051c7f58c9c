"""
Constrained integer matrix.

A fixed-shape 2-D int container whose elements are validated against a set
of comparison constraints on construction and on every row/column write.

Key components:
  - matrix.py: Matrix container (construction, row/column get/set)
  - constraints/builder.py: Constraint, ConstraintSet and factory helpers
  - constraints/validation.py: value/sequence/grid validation dispatch
  - core/errors.py: MatrixError taxonomy (ConstraintViolation, InvalidSize, OutOfRange)
  - core/grid_types.py: Grid type aliases and coercion helpers
"""

from cmatrix.constraints.builder import (
    CONSTRAINT_KINDS,
    Constraint,
    ConstraintKind,
    ConstraintSet,
    between,
    equal,
    greater,
    greater_or_equal,
    less,
    less_or_equal,
    not_equal,
)
from cmatrix.core.errors import (
    ConstraintViolation,
    ErrorKind,
    InvalidSize,
    MatrixError,
    OutOfRange,
    error_message,
)
from cmatrix.matrix import Matrix

__all__ = [
    "Matrix",
    "Constraint",
    "ConstraintKind",
    "ConstraintSet",
    "CONSTRAINT_KINDS",
    "equal",
    "not_equal",
    "greater",
    "greater_or_equal",
    "less",
    "less_or_equal",
    "between",
    "MatrixError",
    "ConstraintViolation",
    "InvalidSize",
    "OutOfRange",
    "ErrorKind",
    "error_message",
]
