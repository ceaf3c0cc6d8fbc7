"""Configuration defaults, presets and startup validation.

Configuration is a plain dict. ``validate_config`` merges user overrides onto
``DEFAULT_CONFIG`` and checks every constraint before any evolutionary work
starts, raising ``ValidationError`` that names the violated constraint.
"""

from __future__ import annotations

import math
from typing import Any

from subleq_evo.utils.validation import ValidationError

DEFAULT_CONFIG: dict[str, Any] = {
    'population_size': 1000,
    'generations': 1000,
    'mutation_rate': 0.05,
    'min_program_length': 6,
    'max_program_length': 64,
    'memory_size': 256,
    'max_execution_steps': 1000,
    'seed': None,
    'parallel_execution': True,
    'max_workers': None,
}

# Tiny search, useful for smoke runs and tests
PRESET_MINIMAL: dict[str, Any] = {
    'population_size': 16,
    'generations': 5,
    'mutation_rate': 0.05,
    'min_program_length': 6,
    'max_program_length': 12,
    'memory_size': 64,
    'max_execution_steps': 200,
}

# Full-scale search
PRESET_STANDARD: dict[str, Any] = {
    'population_size': 10000,
    'generations': 10000,
    'mutation_rate': 0.05,
    'min_program_length': 6,
    'max_program_length': 64,
    'memory_size': 256,
    'max_execution_steps': 1000,
}

PRESETS: dict[str, dict[str, Any]] = {
    'minimal': PRESET_MINIMAL,
    'standard': PRESET_STANDARD,
}

_POSITIVE_INT_KEYS = (
    'population_size',
    'generations',
    'min_program_length',
    'max_program_length',
    'memory_size',
    'max_execution_steps',
)


def _require_int(config: dict[str, Any], key: str) -> int:
    value = config[key]
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            "invalid_type",
            f"{key} must be an integer",
            key=key,
            value=value,
        )
    return value


def validate_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a complete, validated configuration.

    Args:
        overrides: Partial configuration; missing keys fall back to DEFAULT_CONFIG.

    Raises:
        ValidationError: on unknown keys or any violated constraint.
    """
    overrides = dict(overrides or {})
    extras = [k for k in overrides if k not in DEFAULT_CONFIG]
    if extras:
        raise ValidationError(
            "unknown_config_key",
            f"Unknown configuration keys: {sorted(extras)}",
            extras=tuple(sorted(extras)),
        )

    config = dict(DEFAULT_CONFIG)
    config.update(overrides)

    for key in _POSITIVE_INT_KEYS:
        if _require_int(config, key) <= 0:
            raise ValidationError(
                "non_positive",
                f"{key} must be a positive integer",
                key=key,
                value=config[key],
            )

    rate = config['mutation_rate']
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise ValidationError(
            "invalid_type",
            "mutation_rate must be a real number",
            key='mutation_rate',
            value=rate,
        )
    if not math.isfinite(rate) or not 0.0 <= rate <= 1.0:
        raise ValidationError(
            "mutation_rate_out_of_range",
            f"mutation_rate must lie in [0, 1], got {rate}",
            key='mutation_rate',
            value=rate,
        )
    config['mutation_rate'] = float(rate)

    if config['min_program_length'] > config['max_program_length']:
        raise ValidationError(
            "program_length_order",
            "min_program_length must not exceed max_program_length",
            min_program_length=config['min_program_length'],
            max_program_length=config['max_program_length'],
        )

    required_memory = config['max_program_length'] + 3
    if config['memory_size'] < required_memory:
        raise ValidationError(
            "memory_too_small",
            f"memory_size must be at least max_program_length + 3 ({required_memory})",
            memory_size=config['memory_size'],
            required=required_memory,
        )

    if config['seed'] is not None:
        _require_int(config, 'seed')

    workers = config['max_workers']
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers <= 0):
        raise ValidationError(
            "invalid_max_workers",
            "max_workers must be a positive integer or None",
            value=workers,
        )
    config['parallel_execution'] = bool(config['parallel_execution'])

    return config


def preset(name: str, **overrides: Any) -> dict[str, Any]:
    """Validated configuration built from a named preset plus overrides."""
    try:
        base = PRESETS[name]
    except KeyError:
        raise ValidationError(
            "unknown_preset",
            f"Unknown preset: {name}",
            preset=name,
            available=tuple(sorted(PRESETS)),
        ) from None
    merged = dict(base)
    merged.update(overrides)
    return validate_config(merged)


__all__ = [
    "DEFAULT_CONFIG",
    "PRESET_MINIMAL",
    "PRESET_STANDARD",
    "PRESETS",
    "preset",
    "validate_config",
]
