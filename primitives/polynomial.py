"""Abstract polynomial operations.

This module provides polynomial operations without exposing implementation
details like NTT/INTT. Callers in protocol/ should use these abstractions
rather than directly invoking NTT primitives.

Polynomials in coefficient form are ascending: coeffs[i] is the x^i term.
"""

import numpy as np

import galois
from primitives.field import FieldConfig
from primitives.ntt import get_ntt


def to_coefficients(field: FieldConfig, evaluations: np.ndarray) -> np.ndarray:
    """Convert polynomial from evaluation form (over the 2^k subgroup) to coefficients.

    Args:
        field: Field configuration
        evaluations: Values at omega^i, shape (N,) or (N, n_cols), N a power of 2

    Returns:
        Polynomial coefficients in same shape as input
    """
    return get_ntt(field, evaluations.shape[0]).intt(evaluations)


def to_evaluations(field: FieldConfig, coefficients: np.ndarray) -> np.ndarray:
    """Convert polynomial from coefficient form to evaluations at omega^i."""
    return get_ntt(field, coefficients.shape[0]).ntt(coefficients)


def extend_to_coset(
    field: FieldConfig,
    evaluations: np.ndarray,
    extended_size: int,
) -> np.ndarray:
    """Low-degree extension from the base subgroup to a shifted coset.

    Args:
        field: Field configuration
        evaluations: Values on the base subgroup (shape (N,) or (N, n_cols))
        extended_size: Size of the coset domain (multiple of N)

    Returns:
        Values at shift * omega_ext^i for i in [0, extended_size)
    """
    return get_ntt(field, evaluations.shape[0]).extend_pol(evaluations, extended_size)


def from_coset_evaluations(field: FieldConfig, evaluations: np.ndarray) -> np.ndarray:
    """Interpolate coefficients from values at shift * omega^i."""
    return get_ntt(field, evaluations.shape[0]).coset_intt(evaluations)


def degree(coeffs: np.ndarray) -> int:
    """Degree of a coefficient vector; -1 for the zero polynomial."""
    zero = type(coeffs)(0)
    for i in range(len(coeffs) - 1, -1, -1):
        if coeffs[i] != zero:
            return i
    return -1


def evaluate(field: FieldConfig, coeffs: np.ndarray, point):
    """Evaluate a coefficient vector at a single point."""
    if len(coeffs) == 0:
        return field.FF(0)
    # galois uses descending order
    return galois.Poly(coeffs[::-1], field=field.FF)(point)


def evaluate_on_subgroup(field: FieldConfig, coeffs: np.ndarray, size: int) -> np.ndarray:
    """Evaluate at every omega^i of the size-`size` subgroup with a single NTT.

    On the subgroup x^size = 1, so coefficients are first folded modulo
    x^size - 1 and the remainder is transformed.
    """
    reduced = field.FF.Zeros(size)
    for start in range(0, len(coeffs), size):
        chunk = coeffs[start:start + size]
        reduced[:len(chunk)] = reduced[:len(chunk)] + chunk
    return to_evaluations(field, reduced)
