"""Instances consumed and produced by the folding engine.

An Instance is a witness trace with its error vector over one field. It is
produced by the trace generator or by fold(), and consumed by fold() or by
the relation checks. Both vectors are private read-only copies, so an
instance cannot change after it has been checked.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import galois
import numpy as np

from primitives.field import FieldConfig
from protocol.errors import FieldMismatch, LengthMismatch

# Type aliases
Trace = np.ndarray        # 1-D FieldArray, index 0 = seed
ErrorVector = np.ndarray  # 1-D FieldArray, per-step slack


@dataclass(frozen=True, eq=False)
class Instance:
    """A (relaxed) MinRoot instance.

    Relation, for all i in [0, L-3]:
        witness[i] + witness[i+1] - witness[i+2]^alpha + error[i] = 0

    Attributes:
        witness: Trace of length L (read-only)
        error: Error vector of length L (read-only); the last two entries
            are unconstrained
        field: Field configuration the vectors live in

    Raises:
        FieldMismatch: A vector is a FieldArray of another field
        LengthMismatch: Witness and error lengths differ
    """
    witness: Trace
    error: ErrorVector
    field: FieldConfig

    def __post_init__(self) -> None:
        object.__setattr__(self, 'witness', self._frozen_copy('witness', self.witness))
        object.__setattr__(self, 'error', self._frozen_copy('error', self.error))
        if len(self.witness) != len(self.error):
            raise LengthMismatch(
                f"Witness has {len(self.witness)} rows but error has {len(self.error)}"
            )

    def _frozen_copy(self, name: str, values) -> np.ndarray:
        FF = self.field.FF
        if isinstance(values, galois.FieldArray):
            if type(values) is not FF:
                raise FieldMismatch(
                    f"{name} is over {type(values).name}, expected field '{self.field.name}'"
                )
            frozen = values.copy()
        else:
            frozen = FF([int(v) for v in values])
        frozen.flags.writeable = False
        return frozen

    @classmethod
    def from_values(
        cls,
        field: FieldConfig,
        witness: Sequence[Union[int, object]],
        error: Sequence[Union[int, object]],
    ) -> "Instance":
        """Build an instance from integers or field elements."""
        return cls(
            witness=[int(v) for v in witness],
            error=[int(v) for v in error],
            field=field,
        )

    def __len__(self) -> int:
        return len(self.witness)
