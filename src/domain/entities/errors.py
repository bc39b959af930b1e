"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Iterable, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SalesDataUnavailableError(DomainError):
    """Raised when the sales ledger collections have not been initialised."""

    def __init__(
        self,
        missing: Iterable[str],
        details: Optional[Dict[str, Any]] = None,
    ):
        self.missing = sorted(missing)
        message = (
            "Required collections missing. Please initialize the database first."
        )
        super().__init__(message, {"missing": self.missing, **(details or {})})
