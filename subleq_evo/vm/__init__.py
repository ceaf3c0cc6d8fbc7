"""SUBLEQ virtual machine for subleq_evo."""

from .executor import (  # noqa: F401
    WORD_BITS,
    ExecutionResult,
    SubleqVM,
    execute,
    wrap_address,
    wrap_word,
    wrapping_sub,
)

__all__ = [
    'WORD_BITS',
    'ExecutionResult',
    'SubleqVM',
    'execute',
    'wrap_address',
    'wrap_word',
    'wrapping_sub',
]
