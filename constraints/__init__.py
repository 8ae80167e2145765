"""Constraint evaluation modules.

A ConstraintModule evaluates its constraint expression in readable Python
code, and the same expression is reused for trace rows, coset evaluations
and single-point openings through the ConstraintContext implementations.
"""

from .base import (
    ConstraintContext,
    ConstraintModule,
    ProverConstraintContext,
    ProverData,
    RowConstraintContext,
    VerifierConstraintContext,
    VerifierData,
)
from .minroot import MinRootConstraints

__all__ = [
    "ProverData",
    "VerifierData",
    "ConstraintContext",
    "RowConstraintContext",
    "ProverConstraintContext",
    "VerifierConstraintContext",
    "ConstraintModule",
    "MinRootConstraints",
]
