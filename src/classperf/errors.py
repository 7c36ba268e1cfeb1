"""Exceptions and warnings raised by classperf."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when prediction data cannot be evaluated."""

    error_code = "CP_VALIDATION"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}")


class ContractError(RuntimeError):
    """Raised when a caller passes misaligned sequences to a core routine."""


class DegenerateInputWarning(RuntimeWarning):
    """Issued when a single-class dataset makes a rate undefined."""
