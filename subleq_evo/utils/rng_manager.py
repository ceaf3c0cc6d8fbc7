"""Deterministic random number management.

Every consumer of randomness (genome construction, mutation, crossover and
parent selection) receives an explicit ``random.Random`` instead of touching
the module-level generator. Streams are derived from the root seed and a
context key with SHA-256, so:

- the same (seed, context, keys) always yields the same stream
- distinct keys yield independent streams that can be used from different
  worker threads without sharing mutable state
"""

from __future__ import annotations

import hashlib
import random
from typing import Any


class RNGManager:
    """Hands out reproducible random streams derived from a single seed."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2 ** 63)
        self.seed = int(seed)

    def _derive_seed(self, context: str, keys: tuple[Any, ...]) -> int:
        material = ':'.join([str(self.seed), context, *(repr(k) for k in keys)])
        digest = hashlib.sha256(material.encode('utf-8')).digest()
        return int.from_bytes(digest[:8], 'big')

    def derive_rng(self, context: str, *keys: Any) -> random.Random:
        """Return a fresh generator for ``context`` and ``keys``.

        Each call builds a new ``random.Random``; callers own it exclusively.
        """
        return random.Random(self._derive_seed(context, keys))

    def get_rng_for_initialization(self, index: int) -> random.Random:
        return self.derive_rng('init', index)

    def get_rng_for_offspring(self, generation: int, index: int) -> random.Random:
        """Stream used for parent selection, crossover and mutation of one child."""
        return self.derive_rng('offspring', generation, index)


__all__ = ["RNGManager"]
