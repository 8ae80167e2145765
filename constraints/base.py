"""Base classes for constraint evaluation.

ConstraintContext provides a uniform interface for constraint evaluation that
works on trace rows, on the extended coset (returns arrays) and at a single
opening point (returns scalars). The same constraint code is used in all three
contexts thanks to galois broadcasting.

Example:
    def eval_constraint(ctx: ConstraintContext):
        return ctx.col('w') + ctx.next_col('w') - ctx.next_col('w', 2) ** 5 + ctx.const('q')

    # Relaxed-relation residuals on trace rows
    residuals = eval_constraint(RowConstraintContext(row_data))

    # Constraint polynomial evaluations on the coset
    h_evals = eval_constraint(ProverConstraintContext(coset_data))

    # Single value at z
    h_at_z = eval_constraint(VerifierConstraintContext(verifier_data))
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np


@dataclass
class ProverData:
    """Column data for constraint evaluation over a whole domain.

    Attributes:
        columns: Committed columns keyed by name (e.g. 'w')
        constants: Public columns keyed by name (e.g. 'q')
        extend: Blowup factor (N_ext / N), 1 for base rows, >1 on the coset
    """
    columns: dict[str, np.ndarray] = field(default_factory=dict)
    constants: dict[str, np.ndarray] = field(default_factory=dict)
    extend: int = 1


@dataclass
class VerifierData:
    """Openings for constraint evaluation at a single point z.

    Attributes:
        evals: Openings keyed by (name, offset); offset k means the column
            polynomial evaluated at z * omega^k
    """
    evals: dict[tuple[str, int], object] = field(default_factory=dict)


class ConstraintContext(ABC):
    """Uniform interface for constraint evaluation."""

    @abstractmethod
    def col(self, name: str) -> np.ndarray:
        """Get column at current row."""
        pass

    @abstractmethod
    def next_col(self, name: str, offset: int = 1) -> np.ndarray:
        """Get column `offset` rows ahead.

        Returns:
            Rows: values shifted by offset (no wrap-around)
            Prover: coset values rotated by offset * extend (circular)
            Verifier: evaluation at z * omega^offset
        """
        pass

    @abstractmethod
    def const(self, name: str) -> np.ndarray:
        """Get public column at current row."""
        pass


class RowConstraintContext(ConstraintContext):
    """Trace-row implementation.

    Only rows whose look-ahead stays inside the trace are evaluated: with a
    maximum offset of `window - 1`, an L-row column yields L - window + 1
    values. Shifted views are slices of the same arrays.
    """

    def __init__(self, data: ProverData, window: int = 3):
        self._data = data
        self._window = window

    def _n_rows(self, values: np.ndarray) -> int:
        return len(values) - self._window + 1

    def col(self, name: str) -> np.ndarray:
        return self.next_col(name, 0)

    def next_col(self, name: str, offset: int = 1) -> np.ndarray:
        values = self._data.columns[name]
        return values[offset:offset + self._n_rows(values)]

    def const(self, name: str) -> np.ndarray:
        values = self._data.constants[name]
        return values[:self._n_rows(values)]


class ProverConstraintContext(ConstraintContext):
    """Coset implementation - returns evaluation arrays.

    Columns hold evaluations at shift * omega_ext^i. Since omega = omega_ext^extend,
    the column polynomial at omega * x is the same array rotated by `extend`.
    """

    def __init__(self, data: ProverData):
        self._data = data

    def col(self, name: str) -> np.ndarray:
        return self._data.columns[name]

    def next_col(self, name: str, offset: int = 1) -> np.ndarray:
        # On extended domain, row offset is multiplied by extend factor
        extend = self._data.extend
        return np.roll(self.col(name), -offset * extend)

    def const(self, name: str) -> np.ndarray:
        return self._data.constants[name]


class VerifierConstraintContext(ConstraintContext):
    """Single-point implementation - returns scalar evaluations at z."""

    def __init__(self, data: VerifierData):
        self._data = data

    def col(self, name: str):
        return self._data.evals[(name, 0)]

    def next_col(self, name: str, offset: int = 1):
        return self._data.evals[(name, offset)]

    def const(self, name: str):
        return self._data.evals[(name, 0)]


class ConstraintModule(ABC):
    """A constraint system evaluated identically in every context."""

    @abstractmethod
    def constraint_polynomial(self, ctx: ConstraintContext) -> np.ndarray:
        """Evaluate the combined constraint.

        Args:
            ctx: ConstraintContext providing access to columns and constants

        Returns:
            Rows/Prover: array of constraint evaluations
            Verifier: single constraint evaluation at z
        """
        pass
