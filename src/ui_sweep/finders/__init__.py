"""Category finders: each reads a SweepContext and returns a CategoryResult.

The categories follow deliberately different rules (UI components report
only negatives, hooks report both, pages ignore the used set), so each is
its own class rather than one shared "is used" predicate.
"""

from .assets import AssetFinder
from .duplicate import DuplicateFinder
from .hook import HookFinder
from .models import (
    CategoryResult,
    ClassificationRecord,
    Observation,
    SweepContext,
    SweepResult,
)
from .page import PageFinder
from .stylesheet import StylesheetFinder
from .ui_component import UIComponentFinder


def get_default_finders() -> list:
    """Return all finders in report order."""
    return [
        UIComponentFinder(),
        HookFinder(),
        PageFinder(),
        DuplicateFinder(),
        StylesheetFinder(),
        AssetFinder(),
    ]


__all__ = [
    "AssetFinder",
    "CategoryResult",
    "ClassificationRecord",
    "DuplicateFinder",
    "HookFinder",
    "Observation",
    "PageFinder",
    "StylesheetFinder",
    "SweepContext",
    "SweepResult",
    "UIComponentFinder",
    "get_default_finders",
]
