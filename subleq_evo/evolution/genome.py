"""Genome: an evolvable SUBLEQ program."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any


def random_value(memory_size: int, rng: random.Random) -> int:
    """Uniform draw from [-memory_size, memory_size)."""
    return rng.randrange(-memory_size, memory_size)


@dataclass
class Genome:
    """Ordered sequence of signed integers loaded at address 0 of the VM.

    Attributes:
        code: Program cells; the length is fixed for the lifetime of the genome
    """

    code: list[int] = field(default_factory=list)

    @classmethod
    def random(cls, config: dict[str, Any], rng: random.Random) -> "Genome":
        memory_size = int(config['memory_size'])
        length = rng.randint(int(config['min_program_length']), int(config['max_program_length']))
        return cls(code=[random_value(memory_size, rng) for _ in range(length)])

    def mutate(self, mutation_rate: float, memory_size: int, rng: random.Random) -> None:
        """Resample each cell in place with probability ``mutation_rate``."""
        for i in range(len(self.code)):
            if rng.random() < mutation_rate:
                self.code[i] = random_value(memory_size, rng)

    def copy(self) -> "Genome":
        return Genome(code=list(self.code))

    def __len__(self) -> int:
        return len(self.code)


__all__ = ["Genome", "random_value"]
