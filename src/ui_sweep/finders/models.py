"""Data models shared by the category finders."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

from ..config import SweepConfig
from ..exceptions import FileAccessError
from ..graph.used_set import TreeSnapshot, UsedSet
from ..logging_config import get_logger
from ..scanning.imports import read_source
from ..scanning.models import FileCategory, SourceFile

logger = get_logger(__name__)

Status = Literal["used", "unused", "info"]


@dataclass(frozen=True)
class ClassificationRecord:
    file: str  # relative to the source root, e.g. "components/ui/button.tsx"
    category: str  # "UI Component", "Hook", "Page", "Duplicate", "Stylesheet"
    reason: str


@dataclass(frozen=True)
class Observation:
    """One progress line printed while a category is checked."""

    file: str
    status: Status
    message: str


@dataclass
class CategoryResult:
    finder: str
    title: str
    observations: list[Observation] = field(default_factory=list)
    records: list[ClassificationRecord] = field(default_factory=list)

    def note(self, file: str, status: Status, message: str) -> None:
        self.observations.append(Observation(file=file, status=status, message=message))

    def flag(self, file: str, category: str, reason: str) -> None:
        self.records.append(ClassificationRecord(file=file, category=category, reason=reason))


@dataclass
class SweepResult:
    categories: list[CategoryResult]
    files_walked: int = 0  # every file the walk yielded
    files_scanned: int = 0  # files with a source extension, read for imports
    paths_in_use: int = 0

    @property
    def records(self) -> list[ClassificationRecord]:
        """All removal candidates, in category order."""
        return [r for c in self.categories for r in c.records]


@dataclass(frozen=True)
class SweepContext:
    """Read-only view of one run handed to every finder."""

    config: SweepConfig
    snapshot: TreeSnapshot

    @property
    def src_root(self) -> Path:
        return self.snapshot.src_root

    @property
    def used(self) -> UsedSet:
        return self.snapshot.used

    def src_path(self, relative: str) -> Path:
        return self.src_root / relative

    def files_in(self, category: FileCategory, extensions: tuple[str, ...]) -> list[SourceFile]:
        return [
            f for f in self.snapshot.files
            if f.category is category and f.name.endswith(extensions)
        ]

    def read_entry(self) -> Optional[str]:
        """Re-read the entry file's text. None when it is missing or unreadable.

        Not cached: each caller gets a fresh read.
        """
        entry = self.src_path(self.config.entry_file)
        if not entry.is_file():
            return None
        try:
            return read_source(entry)
        except FileAccessError as e:
            logger.warning(f"Entry file unreadable, skipping entry-based checks: {e}")
            return None
