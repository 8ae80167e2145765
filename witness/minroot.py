"""MinRoot VDF evaluation and trace generation.

One MinRoot step (k = 1, 2, ...):

    x_k = (x_{k-1} + y_{k-1})^(1/alpha)
    y_k = x_{k-1} + k

Taking the alpha-th root is the slow, inherently sequential direction. Going
backwards only needs x -> x^alpha, which is what makes the output cheap to
verify. Eliminating y gives the recurrence checked by MinRootConstraints:

    x_i + x_{i+1} - x_{i+2}^alpha + (i + 1) = 0
"""

import logging
from typing import List, Tuple

from primitives.field import FieldConfig
from protocol.data import Instance

LOGGER = logging.getLogger(__name__)


class MinRootHasher:
    """Evaluates MinRoot and, with inspection on, records the full trace.

    Attributes:
        field: Field configuration (selects alpha / alpha_inv)
        inspection: Record every intermediate state
        vec_x: Recorded x states, x_0 first
        vec_y: Recorded y states, y_0 first
    """

    def __init__(self, field: FieldConfig, inspection: bool = True):
        self.field = field
        self.inspection = inspection
        self.vec_x: List = []
        self.vec_y: List = []

    def _iterate_once(self, cur_x, cur_y, indexer: int) -> Tuple:
        next_x = self.field.root_alpha(cur_x + cur_y)
        next_y = cur_x + self.field.FF(indexer)
        if self.inspection:
            self.vec_x.append(next_x)
            self.vec_y.append(next_y)
        return next_x, next_y

    def hash(self, x0, y0, iterations: int) -> Tuple:
        """Run `iterations` MinRoot steps from seed (x0, y0).

        Returns:
            (x_final, y_final) as field elements
        """
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        FF = self.field.FF
        cur_x, cur_y = FF(int(x0)), FF(int(y0))

        self.vec_x, self.vec_y = [], []
        if self.inspection:
            self.vec_x.append(cur_x)
            self.vec_y.append(cur_y)

        for indexer in range(1, iterations + 1):
            cur_x, cur_y = self._iterate_once(cur_x, cur_y, indexer)

        LOGGER.debug("MinRoot over %s: %d iterations", self.field.name, iterations)
        return cur_x, cur_y

    # --- Introspection ---

    def _require_trace(self) -> None:
        if not self.inspection:
            raise RuntimeError("Trace not recorded: hasher was created with inspection=False")
        if not self.vec_x:
            raise RuntimeError("No trace recorded. Call hash() first.")

    @property
    def trace(self):
        """x_0, ..., x_n as a field vector (length iterations + 1)."""
        self._require_trace()
        return self.field.FF([int(v) for v in self.vec_x])

    @property
    def ys(self):
        """y_0, ..., y_n as a field vector."""
        self._require_trace()
        return self.field.FF([int(v) for v in self.vec_y])

    @property
    def indexer(self):
        """Round constants 1, ..., n + 1: the error vector of the recorded trace."""
        self._require_trace()
        return self.field.FF(list(range(1, len(self.vec_x) + 1)))

    def instance(self) -> Instance:
        """Package the recorded run as an (exact) Instance."""
        return Instance(witness=self.trace, error=self.indexer, field=self.field)

    # --- Verification ---

    def verify(self, x0, y0, iterations: int, x_final, y_final) -> bool:
        """Check (x_final, y_final) against the seed by walking the steps backwards.

        x_{k-1} = y_k - k and y_{k-1} = x_k^alpha - x_{k-1}, so each step back
        costs one alpha-th power instead of an alpha-th root.
        """
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        FF = self.field.FF
        x, y = FF(int(x_final)), FF(int(y_final))
        for k in range(iterations, 0, -1):
            prev_x = y - FF(k)
            y = self.field.pow_alpha(x) - prev_x
            x = prev_x
        return bool(x == FF(int(x0))) and bool(y == FF(int(y0)))
