"""
UI Sweep - unused file detector for React/TypeScript frontends

Builds an approximate import graph from raw source text and lists shared
components, hooks, pages, a duplicate utility and the app stylesheet that
look unused. Advisory only: verify before deleting anything.
"""

__version__ = "0.1.0"

from .api import sweep
from .config import SweepConfig, load_config
from .finders import ClassificationRecord, SweepResult

__all__ = [
    "sweep",
    "SweepConfig",
    "load_config",
    "SweepResult",
    "ClassificationRecord",
]
