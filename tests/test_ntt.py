"""Tests for NTT implementation.

Verifies NTT/INTT operations and coset extension against direct evaluation.
"""

import numpy as np
import pytest

from primitives.field import BN254, GOLDILOCKS
from primitives.ntt import NTT, _bit_reverse_indices, get_ntt
from primitives.polynomial import evaluate


class TestNTT:
    """Test NTT operations."""

    @pytest.mark.parametrize("n_bits", [0, 1, 3, 4, 6])
    def test_ntt_intt_roundtrip_single_column(self, field, n_bits: int) -> None:
        """Test that INTT(NTT(x)) == x for single column."""
        N = 1 << n_bits
        ntt = NTT(field, N)
        coeffs = field.FF.Random(N, seed=n_bits)

        evals = ntt.ntt(coeffs)
        recovered = ntt.intt(evals)

        assert np.array_equal(coeffs, recovered), "NTT/INTT roundtrip failed"

    @pytest.mark.parametrize("n_cols", [1, 2, 4])
    def test_ntt_intt_roundtrip_multiple_columns(self, n_cols: int) -> None:
        """Test that INTT(NTT(x)) == x column by column."""
        N = 16
        ntt = NTT(GOLDILOCKS, N)
        coeffs = GOLDILOCKS.FF.Random((N, n_cols), seed=n_cols)

        evals = ntt.ntt(coeffs)
        assert evals.shape == (N, n_cols)
        assert np.array_equal(coeffs, ntt.intt(evals))

    def test_ntt_matches_direct_evaluation(self, field) -> None:
        """NTT output i is the polynomial evaluated at omega^i."""
        N = 8
        ntt = NTT(field, N)
        coeffs = field.FF.Random(N, seed=7)

        evals = ntt.ntt(coeffs)
        for i in range(N):
            assert evals[i] == evaluate(field, coeffs, ntt.omega ** i)

    def test_columns_transform_independently(self) -> None:
        """A batched transform equals transforming each column alone."""
        N = 8
        ntt = NTT(GOLDILOCKS, N)
        coeffs = GOLDILOCKS.FF.Random((N, 3), seed=3)

        batched = ntt.ntt(coeffs)
        for col in range(3):
            assert np.array_equal(batched[:, col], ntt.ntt(coeffs[:, col]))

    def test_ntt_linearity(self) -> None:
        """Test that NTT is linear: NTT(a*x + b*y) == a*NTT(x) + b*NTT(y)."""
        FF = GOLDILOCKS.FF
        N = 16
        ntt = NTT(GOLDILOCKS, N)

        x = FF.Random(N, seed=1)
        y = FF.Random(N, seed=2)
        a = FF(5)
        b = FF(7)

        lhs = ntt.ntt(a * x + b * y)
        rhs = a * ntt.ntt(x) + b * ntt.ntt(y)

        assert np.array_equal(lhs, rhs), "NTT linearity property violated"

    def test_coset_roundtrip(self, field) -> None:
        """coset_intt(coset_ntt(c)) == c."""
        N = 16
        ntt = NTT(field, N)
        coeffs = field.FF.Random(N, seed=11)

        assert np.array_equal(ntt.coset_intt(ntt.coset_ntt(coeffs)), coeffs)

    def test_coset_ntt_evaluates_on_shifted_points(self, field) -> None:
        """coset_ntt output i is the polynomial at shift * omega^i."""
        N = 8
        ntt = NTT(field, N)
        coeffs = field.FF.Random(N, seed=5)

        evals = ntt.coset_ntt(coeffs)
        for i in range(N):
            assert evals[i] == evaluate(field, coeffs, field.shift * ntt.omega ** i)

    @pytest.mark.parametrize("n_bits,extension_factor", [
        (2, 2),   # 4 → 8
        (3, 4),   # 8 → 32
        (4, 8),   # 16 → 128
    ])
    def test_extend_pol_is_low_degree_extension(self, n_bits: int, extension_factor: int) -> None:
        """Extended values are the interpolant evaluated on the coset."""
        N = 1 << n_bits
        N_ext = N * extension_factor
        ntt_src = NTT(GOLDILOCKS, N)
        ntt_ext = NTT(GOLDILOCKS, N_ext)

        evals = GOLDILOCKS.FF.Random(N, seed=n_bits)
        extended = ntt_src.extend_pol(evals, N_ext)
        assert len(extended) == N_ext

        # Interpolant has degree < N: high coefficients are zero
        coeffs_ext = ntt_ext.coset_intt(extended)
        assert np.array_equal(coeffs_ext[:N], ntt_src.intt(evals))
        assert np.all(coeffs_ext[N:] == GOLDILOCKS.FF(0))

    def test_extend_pol_multiple_columns(self) -> None:
        """Polynomial extension keeps the column layout."""
        N, N_ext = 8, 32
        ntt_src = NTT(GOLDILOCKS, N)
        evals = GOLDILOCKS.FF.Random((N, 2), seed=9)

        extended = ntt_src.extend_pol(evals, N_ext)

        assert extended.shape == (N_ext, 2)
        for col in range(2):
            assert np.array_equal(extended[:, col], ntt_src.extend_pol(evals[:, col], N_ext))

    def test_rejects_non_power_of_two(self) -> None:
        with pytest.raises(AssertionError):
            NTT(GOLDILOCKS, 12)

    def test_rejects_size_beyond_two_adicity(self) -> None:
        with pytest.raises(ValueError):
            NTT(BN254, 1 << (BN254.two_adicity + 1))


class TestEngineCache:
    """Test shared engines and the bit-reversal permutation."""

    def test_get_ntt_reuses_engine(self, field) -> None:
        assert get_ntt(field, 16) is get_ntt(field, 16)
        assert get_ntt(field, 16) is not get_ntt(field, 32)

    def test_engines_are_per_field(self) -> None:
        assert get_ntt(BN254, 8).FF is BN254.FF
        assert get_ntt(GOLDILOCKS, 8).FF is GOLDILOCKS.FF

    def test_cached_engine_matches_fresh_engine(self, field) -> None:
        coeffs = field.FF.Random(16, seed=21)
        assert np.array_equal(get_ntt(field, 16).ntt(coeffs), NTT(field, 16).ntt(coeffs))

    @pytest.mark.parametrize("n_bits,expected", [
        (0, [0]),
        (1, [0, 1]),
        (2, [0, 2, 1, 3]),
        (3, [0, 4, 2, 6, 1, 5, 3, 7]),
    ])
    def test_bit_reverse_indices(self, n_bits: int, expected: list) -> None:
        assert _bit_reverse_indices(n_bits).tolist() == expected

    def test_bit_reverse_is_involution(self) -> None:
        rev = _bit_reverse_indices(10)
        assert np.array_equal(rev[rev], np.arange(1 << 10))
