"""Tests for field configurations and batch inversion."""

import pytest

from primitives.field import (
    BN254,
    BN254_PRIME,
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
    FieldConfig,
    batch_inverse,
    get_field,
)


class TestFieldConfig:
    """Per-field constants."""

    def test_alpha_binding(self) -> None:
        """BN254 uses alpha = 5, Goldilocks alpha = 7."""
        assert BN254.alpha == 5
        assert GOLDILOCKS.alpha == 7

    def test_alpha_inv_is_inverse(self, field) -> None:
        """alpha * alpha_inv = 1 mod p - 1."""
        assert (field.alpha * field.alpha_inv) % (field.prime - 1) == 1

    def test_root_undoes_power(self, field) -> None:
        """(x^alpha)^(1/alpha) == x and (x^(1/alpha))^alpha == x."""
        for seed in range(3):
            x = field.FF.Random(seed=seed)
            assert field.root_alpha(field.pow_alpha(x)) == x
            assert field.pow_alpha(field.root_alpha(x)) == x

    def test_non_invertible_alpha_rejected(self) -> None:
        """5 divides Goldilocks p - 1, so alpha = 5 is not a permutation there."""
        with pytest.raises(ValueError, match="not invertible"):
            FieldConfig(name="bad", prime=GOLDILOCKS_PRIME, generator=7, two_adicity=32, alpha=5)

    @pytest.mark.parametrize("n_bits", [0, 1, 4, 10])
    def test_root_of_unity_is_primitive(self, field, n_bits: int) -> None:
        """w^(2^n) == 1 and, for n > 0, w^(2^(n-1)) == -1."""
        w = field.root_of_unity(n_bits)
        assert w ** (1 << n_bits) == field.FF(1)
        if n_bits > 0:
            assert w ** (1 << (n_bits - 1)) == -field.FF(1)

    def test_root_of_unity_beyond_two_adicity(self, field) -> None:
        with pytest.raises(ValueError):
            field.root_of_unity(field.two_adicity + 1)

    def test_registry(self) -> None:
        assert get_field("bn254") is BN254
        assert get_field("goldilocks") is GOLDILOCKS
        assert BN254.prime == BN254_PRIME

    def test_registry_unknown_name(self) -> None:
        with pytest.raises(KeyError, match="Available"):
            get_field("babybear")


class TestBatchInverse:
    """Montgomery batch inversion."""

    def test_empty(self, field) -> None:
        assert len(batch_inverse(field.FF([]))) == 0

    def test_single_element(self, field) -> None:
        vals = field.FF([12345])
        result = batch_inverse(vals)
        assert result[0] * vals[0] == field.FF(1)

    def test_matches_scalar_inversion(self, field) -> None:
        """Batch inversion matches scalar inversion."""
        vals = field.FF([i * 7 + 13 for i in range(50)])
        batch_results = batch_inverse(vals)
        for v, b in zip(vals, batch_results):
            assert b == v ** -1

    def test_zero_raises(self, field) -> None:
        with pytest.raises(ZeroDivisionError):
            batch_inverse(field.FF([3, 0, 5]))
