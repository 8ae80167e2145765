"""MinRoot relaxed relation as a constraint module.

The MinRoot recurrence ties each state to the two before it:

    w[i] + w[i+1] - w[i+2]^alpha + q[i] = 0

where q is the error (slack) column. For a freshly generated trace q is the
round-constant sequence 1, 2, 3, ...; for a folded instance it is whatever
error the fold produced. The IOP builder reuses the same expression with q
replaced by its selector column.
"""

from typing import List

import numpy as np

from .base import ConstraintContext, ConstraintModule, ProverData, RowConstraintContext


class MinRootConstraints(ConstraintModule):
    """Constraint evaluation for the MinRoot recurrence.

    Columns:
        w: witness trace (committed)
        q: error / selector (public)
    """

    def __init__(self, alpha: int):
        self.alpha = alpha

    def constraint_polynomial(self, ctx: ConstraintContext) -> np.ndarray:
        w = ctx.col('w')
        w_next = ctx.next_col('w', 1)
        w_next2 = ctx.next_col('w', 2)
        q = ctx.const('q')
        return w + w_next - w_next2 ** self.alpha + q

    def residuals(self, witness: np.ndarray, error: np.ndarray) -> np.ndarray:
        """Relation value at every constrained row i in [0, L-3]."""
        data = ProverData(columns={'w': witness}, constants={'q': error})
        return self.constraint_polynomial(RowConstraintContext(data))

    def violations(self, witness: np.ndarray, error: np.ndarray) -> List[int]:
        """Rows at which the relation does not hold."""
        res = self.residuals(witness, error)
        return [i for i in range(len(res)) if res[i] != 0]

    def check(self, witness: np.ndarray, error: np.ndarray) -> bool:
        """True iff the relaxed relation holds on every constrained row."""
        return not self.violations(witness, error)
