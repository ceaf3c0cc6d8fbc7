"""Shared utilities for subleq_evo."""

from .rng_manager import RNGManager
from .validation import ValidationError

__all__ = [
    'RNGManager',
    'ValidationError',
]
