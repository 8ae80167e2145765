"""Prime fields for MinRoot traces, bound to their power-map exponents.

Uses galois library for all field arithmetic. Each supported field is a
FieldConfig carrying the galois field class FF together with the constants
the MinRoot relation needs:

    alpha      exponent of the fast (verification) power map x -> x^alpha
    alpha_inv  alpha^-1 mod (p - 1), exponent of the slow root x -> x^(1/alpha)

alpha must be coprime to p - 1, otherwise x -> x^alpha is not a permutation.
This is why Goldilocks uses alpha = 7 while BN254 uses alpha = 5.
"""

import math
from dataclasses import dataclass, field
from typing import Dict

import galois

# --- Field Construction ---

BN254_PRIME = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
GOLDILOCKS_PRIME = 0xFFFFFFFF00000001


@dataclass(frozen=True)
class FieldConfig:
    """A prime field together with its MinRoot exponent pair.

    Attributes:
        name: Registry name (e.g. 'bn254')
        prime: Field modulus p
        generator: Generator of the multiplicative group; also the coset shift
        two_adicity: Largest k with 2^k | p - 1
        alpha: Exponent of the forward power map
        FF: galois field class for GF(p)
    """
    name: str
    prime: int
    generator: int
    two_adicity: int
    alpha: int
    FF: type = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if math.gcd(self.alpha, self.prime - 1) != 1:
            raise ValueError(
                f"alpha={self.alpha} is not invertible mod p - 1 for field '{self.name}'"
            )
        # Skip galois' primality/primitivity search: both are fixed constants
        gf = galois.GF(self.prime, primitive_element=self.generator, verify=False)
        object.__setattr__(self, "FF", gf)

    @property
    def alpha_inv(self) -> int:
        """alpha^-1 mod (p - 1)."""
        return pow(self.alpha, -1, self.prime - 1)

    @property
    def shift(self):
        """Coset shift for low-degree extension."""
        return self.FF(self.generator)

    def root_of_unity(self, n_bits: int):
        """Return primitive 2^n_bits-th root of unity."""
        if n_bits < 0 or n_bits > self.two_adicity:
            raise ValueError(f"n_bits must be in [0, {self.two_adicity}], got {n_bits}")
        return self.FF(pow(self.generator, (self.prime - 1) >> n_bits, self.prime))

    def pow_alpha(self, x):
        """Forward map x -> x^alpha (cheap)."""
        return x ** self.alpha

    def root_alpha(self, x):
        """Inverse map x -> x^(1/alpha) (the sequential, expensive direction).

        alpha_inv does not fit a machine integer, so the exponentiation is done
        on Python ints.
        """
        return self.FF(pow(int(x), self.alpha_inv, self.prime))


BN254 = FieldConfig(
    name="bn254",
    prime=BN254_PRIME,
    generator=5,
    two_adicity=28,
    alpha=5,
)
"""BN254 scalar field, alpha = 5."""

GOLDILOCKS = FieldConfig(
    name="goldilocks",
    prime=GOLDILOCKS_PRIME,
    generator=7,
    two_adicity=32,
    alpha=7,
)
"""Goldilocks field GF(2^64 - 2^32 + 1), alpha = 7 (5 divides p - 1)."""

FIELD_REGISTRY: Dict[str, FieldConfig] = {
    BN254.name: BN254,
    GOLDILOCKS.name: GOLDILOCKS,
}


def get_field(name: str) -> FieldConfig:
    """Look up a field configuration by name.

    Raises:
        KeyError: If no field is registered under that name
    """
    if name not in FIELD_REGISTRY:
        raise KeyError(
            f"No field configuration '{name}'. "
            f"Available: {list(FIELD_REGISTRY.keys())}"
        )
    return FIELD_REGISTRY[name]


# --- Montgomery Batch Inversion ---

def batch_inverse(values):
    """Montgomery batch inversion for any galois array.

    Converts N field inversions into 3N-3 multiplications + 1 inversion.

    Args:
        values: Galois FieldArray to invert (must all be non-zero)

    Returns:
        Galois FieldArray where result[i] = values[i]^(-1)

    Raises:
        ZeroDivisionError: If any element is zero
    """
    n = len(values)
    if n == 0:
        return values
    if n == 1:
        return values ** -1

    field_type = type(values)

    # Forward pass: prefix products
    cumprods = field_type.Zeros(n)
    cumprods[0] = values[0]
    for i in range(1, n):
        cumprods[i] = cumprods[i - 1] * values[i]

    inv_total = cumprods[n - 1] ** -1

    # Backward pass: peel individual inverses off the running product
    results = field_type.Zeros(n)
    z = inv_total
    for i in range(n - 1, 0, -1):
        results[i] = z * cumprods[i - 1]
        z = z * values[i]
    results[0] = z

    return results
