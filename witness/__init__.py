"""Witness generation: MinRoot VDF evaluation with trace introspection."""

from .minroot import MinRootHasher

__all__ = [
    "MinRootHasher",
]
