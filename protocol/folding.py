"""Folding of relaxed MinRoot instances.

Two instances (w1, e1), (w2, e2) that satisfy the relaxed relation

    w[i] + w[i+1] - w[i+2]^alpha + e[i] = 0

are merged with a randomizer r into one instance:

    w3 = r * w1 + w2
    e3[i] = r * e1[i] + e2[i]
            + delta(r * w1[i+2], w2[i+2])
            + (r^alpha - r) * w1[i+2]^alpha

with delta(a, b) = (a + b)^alpha - a^alpha - b^alpha. The linear part of the
relation scales by r, so the alpha-power term has to be corrected by its
cross terms and by the r^alpha vs r mismatch; everything lands in e3.

The randomizer must be unpredictable to whoever produced the instances.
This module takes it as an argument and never picks one itself.
"""

import logging
from typing import Optional, Sequence

from constraints.minroot import MinRootConstraints
from primitives.field import FieldConfig
from protocol.data import Instance
from protocol.errors import FieldMismatch, LengthMismatch, RelationViolated

LOGGER = logging.getLogger(__name__)

MIN_ROWS = 3


def cross_term(a, b, alpha: int):
    """delta(a, b) = (a + b)^alpha - a^alpha - b^alpha, elementwise."""
    return (a + b) ** alpha - a ** alpha - b ** alpha


def check_instance(instance: Instance, label: str = "instance") -> None:
    """Raise RelationViolated unless the relaxed relation holds on every row."""
    constraints = MinRootConstraints(instance.field.alpha)
    rows = constraints.violations(instance.witness, instance.error)
    if rows:
        LOGGER.warning("%s violates the relaxed relation at %d row(s)", label, len(rows))
        raise RelationViolated(
            f"{label} violates the relaxed relation at rows {rows[:8]}"
            + (" ..." if len(rows) > 8 else ""),
            rows,
        )


def fold(instance1: Instance, instance2: Instance, randomizer) -> Instance:
    """Fold two relaxed instances into one.

    Args:
        instance1: First instance (scaled by the randomizer)
        instance2: Second instance
        randomizer: Field element r, ideally a verifier challenge

    Returns:
        Instance satisfying the relaxed relation whenever both inputs do

    Raises:
        LengthMismatch: Inputs differ in length or are shorter than 3 rows
        RelationViolated: An input does not satisfy the relaxed relation
        FieldMismatch: Inputs live in different fields
    """
    if instance1.field != instance2.field:
        raise FieldMismatch(
            f"Cannot fold instances over '{instance1.field.name}' and '{instance2.field.name}'"
        )
    n = len(instance1)
    if n != len(instance2):
        raise LengthMismatch(f"Cannot fold instances of length {n} and {len(instance2)}")
    if n < MIN_ROWS:
        raise LengthMismatch(f"Instances need at least {MIN_ROWS} rows, got {n}")

    check_instance(instance1, "instance1")
    check_instance(instance2, "instance2")

    field = instance1.field
    FF = field.FF
    alpha = field.alpha
    r = FF(int(randomizer))
    w1, e1 = instance1.witness, instance1.error
    w2, e2 = instance2.witness, instance2.error

    witness = r * w1 + w2

    scaled_ahead = r * w1[2:]
    error = FF.Zeros(n)
    error[:n - 2] = (
        r * e1[:n - 2]
        + e2[:n - 2]
        + cross_term(scaled_ahead, w2[2:], alpha)
        + (r ** alpha - r) * w1[2:] ** alpha
    )
    # error[n-2:] stays zero: those rows have no look-ahead

    LOGGER.debug("Folded two %s instances of %d rows", field.name, n)
    return Instance(witness=witness, error=error, field=field)


def fold_many(instances: Sequence[Instance], randomizers: Sequence) -> Instance:
    """Fold instances left to right: fold(fold(i0, i1, r0), i2, r1), ...

    Args:
        instances: At least one instance, all of equal length
        randomizers: One randomizer per fold, len(instances) - 1 in total

    Returns:
        The accumulated instance
    """
    if not instances:
        raise ValueError("fold_many needs at least one instance")
    if len(randomizers) != len(instances) - 1:
        raise ValueError(
            f"Expected {len(instances) - 1} randomizers for {len(instances)} instances, "
            f"got {len(randomizers)}"
        )
    acc = instances[0]
    for instance, r in zip(instances[1:], randomizers):
        acc = fold(acc, instance, r)
    return acc


def sample_randomizer(field: FieldConfig, seed: Optional[int] = None):
    """Uniform nonzero field element.

    This is a local stand-in for a verifier challenge; the caller decides
    where the unpredictability comes from (seed=None draws fresh entropy).
    """
    return field.FF.Random(low=1, seed=seed)
