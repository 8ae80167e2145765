"""Constraint polynomial for a MinRoot trace.

Given a trace x_0, ..., x_{N-1}, build h(X) that vanishes on the whole domain
D iff every step satisfies x_i + x_{i+1} - x_{i+2}^alpha + (i + 1) = 0.

Layout over D (|D| = next power of two >= N + 2), row j:

    padded  = [0, 0, x_0, ..., x_{N-1}, 0, ...]
    W(X)      interpolates padded
    W(wX)     padded shifted by one row     (w = omega, generator of D)
    W(w^2 X)  padded shifted by two rows
    Q(X)      selector:
                j = 0         x_0^alpha
                j = 1         x_1^alpha - x_0
                2 <= j < N    j - 1          (round constant of step j - 2)
                N <= j < |D|  cancels the look-ahead past the end of the trace

    H(X) = W(X) + W(wX) - W(w^2 X)^alpha + Q(X)

The two leading rows and the trailing rows are zero by construction of Q, so
only the N - 2 real steps constrain the trace. H has degree up to
alpha * (|D| - 1), so it is evaluated on a coset of size |D| * blowup with
blowup >= alpha, divided pointwise by Z_D(X) = X^|D| - 1, and interpolated
back. A quotient of degree >= |D| * (alpha - 1) means H was not divisible by
Z_D, i.e. some step is wrong.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from constraints.base import ProverConstraintContext, ProverData, VerifierConstraintContext, VerifierData
from constraints.minroot import MinRootConstraints
from primitives.field import FieldConfig
from primitives.polynomial import (
    degree,
    evaluate,
    evaluate_on_subgroup,
    extend_to_coset,
    from_coset_evaluations,
    to_coefficients,
)
from protocol.domain import CosetDomain, Domain, next_power_of_two
from protocol.errors import DegreeBoundExceeded, DomainTooSmall

LOGGER = logging.getLogger(__name__)

# Leading zero rows aligning the two look-ahead rotations
N_PADDING_ROWS = 2


# --- Configuration ---

@dataclass
class IopConfig:
    """Constraint polynomial builder parameters.

    Attributes:
        blowup: |coset| / |D|; power of two >= alpha. None picks the
            smallest such value for the field.
    """
    blowup: Optional[int] = None

    def resolve_blowup(self, alpha: int) -> int:
        if self.blowup is None:
            return next_power_of_two(alpha)
        if self.blowup < alpha or (self.blowup & (self.blowup - 1)) != 0:
            raise ValueError(
                f"blowup must be a power of two >= alpha={alpha}, got {self.blowup}"
            )
        return self.blowup


# --- Result ---

@dataclass(frozen=True, eq=False)
class ConstraintPolynomials:
    """Coefficient forms produced for one trace.

    Attributes:
        h: Constraint polynomial H
        t: Quotient H / Z_D
        w: Padded-trace interpolant W
        q: Selector Q
        domain: Base domain D
        coset: Evaluation coset
    """
    h: np.ndarray
    t: np.ndarray
    w: np.ndarray
    q: np.ndarray
    domain: Domain
    coset: CosetDomain

    @property
    def field(self) -> FieldConfig:
        return self.domain.field

    @property
    def degree_bound(self) -> int:
        """deg(t) is strictly below this."""
        return self.domain.size * (self.field.alpha - 1)

    def evaluations_on_domain(self) -> np.ndarray:
        """h(omega^j) for every j in [0, |D|)."""
        return evaluate_on_subgroup(self.field, self.h, self.domain.size)

    def check_at(self, point) -> bool:
        """Check the identity at one point z.

        Recomputes H(z) from W(z), W(wz), W(w^2 z) and Q(z) with the constraint
        expression, then checks h(z) == H(z) == t(z) * Z_D(z).
        """
        field = self.field
        z = field.FF(int(point))
        omega = self.domain.omega
        evals = {
            ('w', 0): evaluate(field, self.w, z),
            ('w', 1): evaluate(field, self.w, z * omega),
            ('w', 2): evaluate(field, self.w, z * omega ** 2),
            ('q', 0): evaluate(field, self.q, z),
        }
        ctx = VerifierConstraintContext(VerifierData(evals=evals))
        expected = MinRootConstraints(field.alpha).constraint_polynomial(ctx)
        h_at_z = evaluate(field, self.h, z)
        t_at_z = evaluate(field, self.t, z)
        return bool(expected == h_at_z) and bool(h_at_z == t_at_z * self.domain.vanishing(z))


# --- Construction ---

def _as_field_vector(field: FieldConfig, values: Union[np.ndarray, Sequence]) -> np.ndarray:
    return field.FF([int(v) for v in values])


def _padded_trace(trace: np.ndarray, domain: Domain) -> np.ndarray:
    """[0, 0, x_0, ..., x_{N-1}] zero-extended to |D| rows."""
    padded = domain.field.FF.Zeros(domain.size)
    padded[N_PADDING_ROWS:N_PADDING_ROWS + len(trace)] = trace
    return padded


def _selector(padded: np.ndarray, n_trace: int, domain: Domain) -> np.ndarray:
    """Selector values Q(omega^j) for every row of D."""
    FF = domain.field.FF
    alpha = domain.field.alpha
    size = domain.size
    x0, x1 = padded[N_PADDING_ROWS], padded[N_PADDING_ROWS + 1]

    q = FF.Zeros(size)
    q[0] = x0 ** alpha
    q[1] = x1 ** alpha - x0
    q[N_PADDING_ROWS:n_trace] = FF(list(range(1, n_trace - 1)))

    # Rows whose rotations run past the trace: cancel them, cyclically like W(wX)
    rows = np.arange(n_trace, size)
    q[n_trace:] = -(
        padded[rows] + padded[(rows + 1) % size] - padded[(rows + 2) % size] ** alpha
    )
    return q


def _build(
    trace: Union[np.ndarray, Sequence],
    field: FieldConfig,
    config: Optional[IopConfig],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Domain, CosetDomain]:
    """Steps shared by both entry points: returns (H coset evals, W, Q, D, coset)."""
    config = config or IopConfig()
    if len(trace) <= 2:
        raise DomainTooSmall(f"Trace must have more than 2 rows, got {len(trace)}")

    trace = _as_field_vector(field, trace)
    n = len(trace)
    domain = Domain.for_length(field, n + N_PADDING_ROWS)
    coset = CosetDomain(domain, config.resolve_blowup(field.alpha))
    LOGGER.debug(
        "Constraint polynomial over %s: trace %d, domain %d, coset %d",
        field.name, n, domain.size, coset.size,
    )

    padded = _padded_trace(trace, domain)
    selector = _selector(padded, n, domain)

    # Interpolate W and Q together, then extend both onto the coset
    columns = field.FF.Zeros((domain.size, 2))
    columns[:, 0] = padded
    columns[:, 1] = selector
    coeffs = to_coefficients(field, columns)
    extended = extend_to_coset(field, columns, coset.size)

    data = ProverData(
        columns={'w': extended[:, 0]},
        constants={'q': extended[:, 1]},
        extend=coset.blowup,
    )
    h_evals = MinRootConstraints(field.alpha).constraint_polynomial(ProverConstraintContext(data))
    return h_evals, coeffs[:, 0], coeffs[:, 1], domain, coset


def compute_polynomial_h(
    trace: Union[np.ndarray, Sequence],
    field: FieldConfig,
    config: Optional[IopConfig] = None,
) -> np.ndarray:
    """Coefficients of H for a trace, without the quotient degree check.

    Also usable on traces that do not satisfy the recurrence.

    Raises:
        DomainTooSmall: Trace has 2 rows or fewer, or the field lacks the subgroup
    """
    h_evals, _, _, _, _ = _build(trace, field, config)
    return from_coset_evaluations(field, h_evals)


def build_constraint_polynomial(
    trace: Union[np.ndarray, Sequence],
    field: FieldConfig,
    config: Optional[IopConfig] = None,
) -> ConstraintPolynomials:
    """Build H and its quotient t = H / Z_D, enforcing deg(t) < |D| * (alpha - 1).

    Raises:
        DomainTooSmall: Trace has 2 rows or fewer, or the field lacks the subgroup
        DegreeBoundExceeded: The trace does not satisfy the recurrence
    """
    h_evals, w, q, domain, coset = _build(trace, field, config)

    t_evals = h_evals * coset.vanishing_inverses()
    h = from_coset_evaluations(field, h_evals)
    t = from_coset_evaluations(field, t_evals)

    bound = domain.size * (field.alpha - 1)
    deg_t = degree(t)
    if deg_t >= bound:
        LOGGER.warning("Quotient degree %d is not below %d: trace rejected", deg_t, bound)
        raise DegreeBoundExceeded(deg_t, bound)

    return ConstraintPolynomials(h=h, t=t, w=w, q=q, domain=domain, coset=coset)
