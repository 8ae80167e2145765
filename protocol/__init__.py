"""Protocol - MinRoot folding and constraint-polynomial construction."""

from protocol.errors import (
    DegreeBoundExceeded,
    DomainTooSmall,
    FieldMismatch,
    LengthMismatch,
    MinRootError,
    RelationViolated,
)
from protocol.data import ErrorVector, Instance, Trace
from protocol.domain import CosetDomain, Domain, next_power_of_two

from protocol.folding import (
    check_instance,
    cross_term,
    fold,
    fold_many,
    sample_randomizer,
)

from protocol.iop import (
    ConstraintPolynomials,
    IopConfig,
    build_constraint_polynomial,
    compute_polynomial_h,
)

__all__ = [
    # Errors
    "MinRootError",
    "LengthMismatch",
    "FieldMismatch",
    "RelationViolated",
    "DomainTooSmall",
    "DegreeBoundExceeded",
    # Data
    "Instance",
    "Trace",
    "ErrorVector",
    "Domain",
    "CosetDomain",
    "next_power_of_two",
    # Folding
    "fold",
    "fold_many",
    "cross_term",
    "check_instance",
    "sample_randomizer",
    # IOP
    "IopConfig",
    "ConstraintPolynomials",
    "compute_polynomial_h",
    "build_constraint_polynomial",
]
