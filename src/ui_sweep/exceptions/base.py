"""Base exception for UI Sweep."""

from typing import Any, Mapping, Optional


class UISweepError(Exception):
    """Base exception for all UI Sweep errors.

    ``details`` values are stored as strings so paths print the same on
    every platform's ``str()``.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: str(v) for k, v in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
