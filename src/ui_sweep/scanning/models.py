"""Data models for scanned source files and import edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..config import SweepConfig


class FileCategory(Enum):
    """Category of a source file, inferred from its containing directory."""

    UI_COMPONENT = "ui-component"
    HOOK = "hook"
    PAGE = "page"
    OTHER = "other"


@dataclass(frozen=True)
class SourceFile:
    path: Path
    category: FileCategory

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class ImportEdge:
    origin: Path
    specifier: str
    resolved: Optional[str]  # None = discarded (external package)

    @property
    def discarded(self) -> bool:
        return self.resolved is None


def categorize(path: Path, src_root: Path, config: SweepConfig) -> SourceFile:
    """Build a SourceFile, categorised by the directory that directly holds it.

    Only direct children count: ``components/ui/forms/input.tsx`` is OTHER.
    """
    try:
        parent = path.parent.relative_to(src_root).as_posix()
    except ValueError:
        return SourceFile(path=path, category=FileCategory.OTHER)

    by_dir = {
        config.ui_dir.strip("/"): FileCategory.UI_COMPONENT,
        config.hooks_dir.strip("/"): FileCategory.HOOK,
        config.pages_dir.strip("/"): FileCategory.PAGE,
    }
    return SourceFile(path=path, category=by_dir.get(parent, FileCategory.OTHER))
