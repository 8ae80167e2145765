"""Error taxonomy for folding and constraint-polynomial construction.

All errors are fatal: inputs are expected to be valid, so a failure means the
caller handed over a malformed or dishonest instance.
"""

from typing import List


class MinRootError(ValueError):
    """Base class for MinRoot folding / IOP failures."""


class LengthMismatch(MinRootError):
    """Vectors that must be aligned row-by-row have different lengths."""


class RelationViolated(MinRootError):
    """An instance does not satisfy the relaxed MinRoot relation."""

    def __init__(self, message: str, rows: List[int]):
        super().__init__(message)
        self.rows = rows


class DomainTooSmall(MinRootError):
    """The trace is too short, or the field cannot host the needed subgroup."""


class DegreeBoundExceeded(MinRootError):
    """Quotient polynomial degree is not below |D| * (alpha - 1)."""

    def __init__(self, degree: int, bound: int):
        super().__init__(f"Quotient degree {degree} exceeds bound: must be < {bound}")
        self.degree = degree
        self.bound = bound


class FieldMismatch(MinRootError):
    """Vectors or instances belong to a different field than expected."""
