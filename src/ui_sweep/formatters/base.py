"""Base formatter interface for UI Sweep output rendering."""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from ..finders.models import SweepResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: SweepResult, console: Optional[Console] = None) -> None:
        """Render the result to the console (stdout by default)."""

    @abstractmethod
    def format(self, result: SweepResult) -> str:
        """Return the plain-text representation of the result."""
