"""Structured validation errors."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """A failed constraint with a machine-readable code.

    Attributes:
        code: Short identifier of the violated constraint (e.g. "memory_too_small")
        message: Human readable description
        context: Extra key/value details about the offending values
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
        self.context = dict(context)

    def to_dict(self) -> dict[str, Any]:
        return {'code': self.code, 'message': self.message, 'context': dict(self.context)}


__all__ = ["ValidationError"]
