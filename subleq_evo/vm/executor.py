"""SUBLEQ virtual machine.

The machine has a single instruction. Three consecutive cells at ``pc`` hold
operands A, B and C; the machine performs ``mem[A] -= mem[B]`` and jumps to C
when the result is not positive, otherwise it advances by three cells.

Operands are reduced modulo the memory size, so every address is valid, and
cells are 32-bit two's-complement words whose subtraction wraps. Execution is
therefore total: it ends either when ``pc`` leaves the region where a full
instruction fits or when the step cap is reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence

WORD_BITS = 32
_WORD_MODULUS = 1 << WORD_BITS
_WORD_HALF = 1 << (WORD_BITS - 1)


def wrap_word(value: int) -> int:
    """Reduce an arbitrary int to a signed 32-bit word."""
    return ((value + _WORD_HALF) % _WORD_MODULUS) - _WORD_HALF


def wrapping_sub(a: int, b: int) -> int:
    return wrap_word(a - b)


def wrap_address(value: int, memory_size: int) -> int:
    """Map a raw operand to an address in [0, memory_size)."""
    # Python's % is non-negative for a positive modulus
    return value % memory_size


class ExecutionResult(NamedTuple):
    memory: list[int]
    steps: int


@dataclass(frozen=True)
class SubleqVM:
    """Executor bound to a memory size and a step budget."""

    memory_size: int = 256
    max_execution_steps: int = 1000

    def __post_init__(self) -> None:
        if self.memory_size < 3:
            raise ValueError("memory_size must hold at least one instruction")
        if self.max_execution_steps < 0:
            raise ValueError("max_execution_steps must be non-negative")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "SubleqVM":
        return cls(
            memory_size=int(config['memory_size']),
            max_execution_steps=int(config['max_execution_steps']),
        )

    def load(self, code: Sequence[int]) -> list[int]:
        """Build a fresh zeroed memory image with ``code`` at address 0."""
        if len(code) > self.memory_size:
            raise ValueError(
                f"Program of length {len(code)} does not fit in {self.memory_size} cells"
            )
        memory = [0] * self.memory_size
        memory[:len(code)] = [wrap_word(int(v)) for v in code]
        return memory

    def execute(self, code: Sequence[int]) -> ExecutionResult:
        """Run ``code`` until halt or the step cap.

        Returns:
            ExecutionResult(memory, steps): the final memory image (a new list,
            never aliased with ``code``) and the number of executed instructions.
        """
        size = self.memory_size
        limit = self.max_execution_steps
        last_pc = size - 3
        memory = self.load(code)

        pc = 0
        steps = 0
        while pc <= last_pc and steps < limit:
            a = wrap_address(memory[pc], size)
            b = wrap_address(memory[pc + 1], size)
            c = wrap_address(memory[pc + 2], size)

            memory[a] = wrapping_sub(memory[a], memory[b])
            if memory[a] <= 0:
                pc = c
            else:
                pc += 3
            steps += 1

        return ExecutionResult(memory, steps)


def execute(code: Sequence[int], memory_size: int = 256, max_execution_steps: int = 1000) -> ExecutionResult:
    """Convenience wrapper around ``SubleqVM(...).execute(code)``."""
    return SubleqVM(memory_size, max_execution_steps).execute(code)


__all__ = [
    "WORD_BITS",
    "ExecutionResult",
    "SubleqVM",
    "execute",
    "wrap_address",
    "wrap_word",
    "wrapping_sub",
]
