"""Primitives - Field arithmetic, NTT and polynomial building blocks."""

from primitives.field import (
    BN254,
    BN254_PRIME,
    FIELD_REGISTRY,
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
    FieldConfig,
    batch_inverse,
    get_field,
)
from primitives.ntt import NTT, get_ntt
from primitives.polynomial import (
    degree,
    evaluate,
    evaluate_on_subgroup,
    extend_to_coset,
    from_coset_evaluations,
    to_coefficients,
    to_evaluations,
)

__all__ = [
    # Field
    "FieldConfig",
    "BN254",
    "BN254_PRIME",
    "GOLDILOCKS",
    "GOLDILOCKS_PRIME",
    "FIELD_REGISTRY",
    "get_field",
    "batch_inverse",
    # NTT
    "NTT",
    "get_ntt",
    # Polynomials
    "to_coefficients",
    "to_evaluations",
    "extend_to_coset",
    "from_coset_evaluations",
    "degree",
    "evaluate",
    "evaluate_on_subgroup",
]
