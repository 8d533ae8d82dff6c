"""Custom exceptions for asesor.

Scoring itself never raises: unknown answers fall back to defaults. These
types cover the boundaries around it (label and catalog lookups).
"""

from __future__ import annotations

from typing import Any


class AsesorError(Exception):
    """Base exception for all asesor errors."""
    pass


class InvalidParameterError(AsesorError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)
