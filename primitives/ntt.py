"""Number Theoretic Transform over a configured prime field."""

from functools import lru_cache

import numpy as np

from primitives.field import FieldConfig

# --- NTT Engine ---

class NTT:
    """NTT engine for polynomial operations over a FieldConfig's field.

    Transforms act on axis 0 and accept either a 1-D vector or an
    (N, n_cols) batch of columns.
    """

    def __init__(self, field: FieldConfig, domain_size: int) -> None:
        """Initialize NTT engine for given domain size."""
        assert domain_size > 0, "Domain size must be positive"
        assert (domain_size & (domain_size - 1)) == 0, "Domain size must be power of 2"

        self.field = field
        self.FF = field.FF
        self.n = domain_size
        self.n_bits = _log2(domain_size)

        # Precompute twiddle factors (raises if the field has no such subgroup)
        self.omega = field.root_of_unity(self.n_bits)
        self.roots = _precompute_roots(self.FF, self.omega, domain_size)
        self.roots_inv = self.roots[(-np.arange(domain_size)) % domain_size]
        self.bit_reverse = _bit_reverse_indices(self.n_bits)
        self.n_inv = self.FF(domain_size) ** -1

        # Coset shift arrays (computed lazily)
        self.r: np.ndarray | None = None
        self.r_: np.ndarray | None = None

    def _compute_r(self) -> None:
        """Compute coset shift arrays r[i] = shift^i and r_[i] = shift^-i."""
        shift = self.field.shift
        self.r = _precompute_roots(self.FF, shift, self.n)
        self.r_ = _precompute_roots(self.FF, shift ** -1, self.n)

    def ntt(self, coeffs: np.ndarray) -> np.ndarray:
        """Forward NTT: coefficients -> evaluations at omega^i."""
        if coeffs.size == 0:
            return coeffs
        return self._transform(coeffs, self.roots)

    def intt(self, evals: np.ndarray) -> np.ndarray:
        """Inverse NTT: evaluations at omega^i -> coefficients."""
        if evals.size == 0:
            return evals
        return self._transform(evals, self.roots_inv) * self.n_inv

    def coset_ntt(self, coeffs: np.ndarray) -> np.ndarray:
        """Coefficients -> evaluations at shift * omega^i."""
        if self.r is None:
            self._compute_r()
        return self.ntt(coeffs * _as_column(self.r, coeffs.ndim))

    def coset_intt(self, evals: np.ndarray) -> np.ndarray:
        """Evaluations at shift * omega^i -> coefficients."""
        if self.r_ is None:
            self._compute_r()
        return self.intt(evals) * _as_column(self.r_, evals.ndim)

    def extend_pol(self, src: np.ndarray, n_extended: int) -> np.ndarray:
        """Extend evaluations over this domain to the coset of size n_extended.

        INTT over the base domain, zero-pad the coefficients, then coset NTT
        on the extended domain.
        """
        assert n_extended >= self.n, "Extended size must be >= original size"
        assert n_extended % self.n == 0, "Extended size must be multiple of original size"

        coeffs = self.intt(src)
        output = self.FF.Zeros((n_extended,) + coeffs.shape[1:])
        output[:self.n] = coeffs

        return get_ntt(self.field, n_extended).coset_ntt(output)

    def _transform(self, values: np.ndarray, roots: np.ndarray) -> np.ndarray:
        """Iterative radix-2 Cooley-Tukey (decimation in time) along axis 0."""
        assert values.shape[0] == self.n, f"Expected {self.n} rows, got {values.shape[0]}"

        input_is_1d = values.ndim == 1
        data = values.reshape(self.n, -1)[self.bit_reverse]
        n_cols = data.shape[1]

        half = 1
        while half < self.n:
            stride = self.n // (2 * half)
            twiddles = roots[::stride][:half].reshape(half, 1)
            blocks = data.reshape(self.n // (2 * half), 2, half, n_cols)
            even = blocks[:, 0]
            odd = blocks[:, 1] * twiddles
            merged = self.FF.Zeros(blocks.shape)
            merged[:, 0] = even + odd
            merged[:, 1] = even - odd
            data = merged.reshape(self.n, n_cols)
            half *= 2

        return data.reshape(self.n) if input_is_1d else data


@lru_cache(maxsize=64)
def get_ntt(field: FieldConfig, domain_size: int) -> NTT:
    """Shared NTT engine per (field, size); twiddles are computed once."""
    return NTT(field, domain_size)


# --- Helpers ---

def _log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    assert size != 0
    res = 0
    while size != 1:
        size >>= 1
        res += 1
    return res


def _precompute_roots(FF: type, omega, n_roots: int) -> np.ndarray:
    """Precompute powers: roots[k] = omega^k."""
    roots = FF.Zeros(n_roots)
    roots[0] = FF(1)
    for i in range(1, n_roots):
        roots[i] = roots[i - 1] * omega
    return roots


def _bit_reverse_indices(n_bits: int) -> np.ndarray:
    """Permutation taking index i to its n_bits-bit reversal."""
    idx = np.arange(1 << n_bits, dtype=np.int64)
    rev = np.zeros_like(idx)
    for bit in range(n_bits):
        rev |= ((idx >> bit) & 1) << (n_bits - 1 - bit)
    return rev


def _as_column(vec: np.ndarray, ndim: int) -> np.ndarray:
    """Reshape a per-row factor so it broadcasts over (N,) or (N, n_cols)."""
    return vec if ndim == 1 else vec.reshape(-1, 1)
