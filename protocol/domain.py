"""Evaluation domains for the constraint polynomial.

Domain is the multiplicative subgroup of order 2^k on which the padded trace
lives; CosetDomain is shift * <omega_ext>, |coset| = |D| * blowup, where
polynomials of degree up to alpha * (|D| - 1) are evaluated without aliasing.
"""

from dataclasses import dataclass

import numpy as np

from primitives.field import FieldConfig, batch_inverse
from primitives.ntt import _log2
from protocol.errors import DomainTooSmall


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n >= 1)."""
    return 1 << (n - 1).bit_length()


@dataclass(frozen=True)
class Domain:
    """Subgroup of order `size` generated by omega."""
    field: FieldConfig
    size: int

    def __post_init__(self) -> None:
        assert self.size > 0 and (self.size & (self.size - 1)) == 0, "Domain size must be power of 2"
        if self.n_bits > self.field.two_adicity:
            raise DomainTooSmall(
                f"Field '{self.field.name}' has no subgroup of order 2^{self.n_bits} "
                f"(two-adicity {self.field.two_adicity})"
            )

    @classmethod
    def for_length(cls, field: FieldConfig, n_rows: int) -> "Domain":
        """Smallest domain holding n_rows rows."""
        return cls(field, next_power_of_two(n_rows))

    @property
    def n_bits(self) -> int:
        return _log2(self.size)

    @property
    def omega(self):
        return self.field.root_of_unity(self.n_bits)

    def element(self, i: int):
        """omega^i."""
        return self.omega ** (i % self.size)

    def elements(self) -> np.ndarray:
        """[1, omega, omega^2, ..., omega^(size-1)]."""
        FF = self.field.FF
        powers = FF.Ones(self.size)
        omega = self.omega
        for i in range(1, self.size):
            powers[i] = powers[i - 1] * omega
        return powers

    def vanishing(self, x):
        """Z_D(x) = x^size - 1."""
        return x ** self.size - self.field.FF(1)


@dataclass(frozen=True)
class CosetDomain:
    """shift * <omega_ext> with |coset| = base.size * blowup."""
    base: Domain
    blowup: int

    def __post_init__(self) -> None:
        assert self.blowup > 0 and (self.blowup & (self.blowup - 1)) == 0, "Blowup must be power of 2"
        n_bits = _log2(self.size)
        if n_bits > self.base.field.two_adicity:
            raise DomainTooSmall(
                f"Field '{self.base.field.name}' has no subgroup of order 2^{n_bits} "
                f"for a coset of size {self.size}"
            )

    @property
    def size(self) -> int:
        return self.base.size * self.blowup

    @property
    def shift(self):
        return self.base.field.shift

    def elements(self) -> np.ndarray:
        """Coset points shift * omega_ext^i for i in [0, size)."""
        return self.shift * Domain(self.base.field, self.size).elements()

    def vanishing_evaluations(self) -> np.ndarray:
        """Z_D evaluated at every coset point.

        (shift * w_ext^i)^|D| = shift^|D| * w_blowup^i, so the values repeat
        with period `blowup`.
        """
        FF = self.base.field.FF
        shift_n = self.shift ** self.base.size
        unique_vals = shift_n * Domain(self.base.field, self.blowup).elements() - FF(1)
        return unique_vals[np.arange(self.size) % self.blowup]

    def vanishing_inverses(self) -> np.ndarray:
        """1 / Z_D at every coset point (never zero off D)."""
        unique_inv = batch_inverse(self.vanishing_evaluations()[:self.blowup])
        return unique_inv[np.arange(self.size) % self.blowup]
