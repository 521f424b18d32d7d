"""Domain errors and failure typing."""

from __future__ import annotations

from typing import Any


class FatalityError(Exception):
    """Base class for library failures."""

    error_code = "FATALITY_ERROR"


class ConfigError(FatalityError):
    """Raised for invalid or missing severity policy configuration."""

    error_code = "CONFIG_ERROR"


class UnwrapError(FatalityError):
    """Raised when a result is unwrapped on the wrong side."""

    error_code = "UNWRAP_ERROR"


class EscalatedError(FatalityError):
    """Carries an escalating error through ordinary raise/except propagation."""

    error_code = "ESCALATED_ERROR"

    def __init__(self, escalating: Any) -> None:
        super().__init__(escalating)
        self.escalating = escalating
        if escalating.is_fatal():
            self.error_code = "ESCALATED_FATAL"

    def __str__(self) -> str:
        return str(self.escalating)
