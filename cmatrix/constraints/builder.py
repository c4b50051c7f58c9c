"""
Comparison constraints for matrix elements.

This module defines the constraint data structures that a Matrix checks
every stored element against.

Constraints have the form:
    x <kind> value

where x is the candidate element and kind is one of the six integer
comparisons below. All constraints registered on a matrix must hold
at once (conjunction).

No matrix or validation-dispatch logic here.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Sequence, get_args

import numpy as np


ConstraintKind = Literal[
    "equal",
    "not_equal",
    "greater",
    "greater_or_equal",
    "less",
    "less_or_equal",
]

CONSTRAINT_KINDS = get_args(ConstraintKind)


@dataclass(frozen=True)
class Constraint:
    """
    Represents a single comparison constraint:

        x <kind> value

    Attributes:
        kind: Comparison kind (one of CONSTRAINT_KINDS)
        value: Reference value the candidate is compared against

    Example:
        # every element must be non-negative
        Constraint(kind="greater_or_equal", value=0)
    """
    kind: ConstraintKind
    value: int

    def __post_init__(self):
        assert self.kind in CONSTRAINT_KINDS, f"Unknown constraint kind: {self.kind!r}"
        assert isinstance(self.value, (int, np.integer)) and not isinstance(self.value, bool), \
            f"Constraint value must be an integer, got {self.value!r}"

    def check(self, candidate: int) -> bool:
        """
        Return True iff candidate satisfies this constraint.

        Args:
            candidate: Integer to test

        Returns:
            Result of `candidate <kind> value`

        Example:
            >>> Constraint("less_or_equal", 9).check(10)
            False
        """
        if self.kind == "equal":
            return candidate == self.value
        elif self.kind == "not_equal":
            return candidate != self.value
        elif self.kind == "greater":
            return candidate > self.value
        elif self.kind == "greater_or_equal":
            return candidate >= self.value
        elif self.kind == "less":
            return candidate < self.value
        elif self.kind == "less_or_equal":
            return candidate <= self.value
        raise AssertionError(f"Unknown constraint kind: {self.kind!r}")

    @property
    def symbol(self) -> str:
        """Comparison operator for this kind, e.g. '>=' for greater_or_equal."""
        if self.kind == "equal":
            return "=="
        elif self.kind == "not_equal":
            return "!="
        elif self.kind == "greater":
            return ">"
        elif self.kind == "greater_or_equal":
            return ">="
        elif self.kind == "less":
            return "<"
        elif self.kind == "less_or_equal":
            return "<="
        raise AssertionError(f"Unknown constraint kind: {self.kind!r}")

    def __str__(self) -> str:
        return f"x {self.symbol} {self.value}"


def equal(value: int) -> Constraint:
    return Constraint("equal", value)


def not_equal(value: int) -> Constraint:
    return Constraint("not_equal", value)


def greater(value: int) -> Constraint:
    return Constraint("greater", value)


def greater_or_equal(value: int) -> Constraint:
    return Constraint("greater_or_equal", value)


def less(value: int) -> Constraint:
    return Constraint("less", value)


def less_or_equal(value: int) -> Constraint:
    return Constraint("less_or_equal", value)


def between(low: int, high: int) -> List[Constraint]:
    """
    Inclusive range [low, high] as a pair of constraints.

    Example:
        >>> [str(c) for c in between(0, 9)]
        ['x >= 0', 'x <= 9']
    """
    return [greater_or_equal(low), less_or_equal(high)]


@dataclass
class ConstraintSet(Sequence[Constraint]):
    """
    Collects constraints to hand to a Matrix.

    The add_* methods return the builder so calls can be chained. A Matrix
    copies the constraints it is given, so changing a ConstraintSet after
    the matrix is built has no effect on that matrix.

    Attributes:
        constraints: List of Constraint objects, in insertion order

    Example:
        >>> cs = ConstraintSet().add_between(0, 9).add_not_equal(5)
        >>> len(cs)
        3
    """
    constraints: List[Constraint] = field(default_factory=list)

    def add(self, constraint: Constraint) -> "ConstraintSet":
        assert isinstance(constraint, Constraint), \
            f"Expected Constraint, got {type(constraint).__name__}"
        self.constraints.append(constraint)
        return self

    def add_equal(self, value: int) -> "ConstraintSet":
        return self.add(equal(value))

    def add_not_equal(self, value: int) -> "ConstraintSet":
        return self.add(not_equal(value))

    def add_greater(self, value: int) -> "ConstraintSet":
        return self.add(greater(value))

    def add_greater_or_equal(self, value: int) -> "ConstraintSet":
        return self.add(greater_or_equal(value))

    def add_less(self, value: int) -> "ConstraintSet":
        return self.add(less(value))

    def add_less_or_equal(self, value: int) -> "ConstraintSet":
        return self.add(less_or_equal(value))

    def add_between(self, low: int, high: int) -> "ConstraintSet":
        for c in between(low, high):
            self.add(c)
        return self

    def check(self, candidate: int) -> bool:
        """True iff candidate satisfies every collected constraint."""
        return all(c.check(candidate) for c in self.constraints)

    def __getitem__(self, i):
        return self.constraints[i]

    def __len__(self) -> int:
        return len(self.constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)


if __name__ == "__main__":
    # Self-test
    print("Testing constraint kinds...")
    cases = [
        ("equal", 3, [(3, True), (4, False)]),
        ("not_equal", 3, [(3, False), (4, True)]),
        ("greater", 3, [(3, False), (4, True)]),
        ("greater_or_equal", 3, [(2, False), (3, True)]),
        ("less", 3, [(2, True), (3, False)]),
        ("less_or_equal", 3, [(3, True), (4, False)]),
    ]
    for kind, value, checks in cases:
        c = Constraint(kind, value)
        for candidate, expected in checks:
            assert c.check(candidate) == expected, f"{c} failed for {candidate}"
        print(f"  ✓ {kind}: {c}")

    cs = ConstraintSet().add_between(0, 9)
    assert cs.check(0) and cs.check(9) and not cs.check(10)
    print("\n✓ builder.py self-test passed.")
