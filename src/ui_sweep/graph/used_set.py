"""The used set: every logical path any import in the tree points at.

Built in one full pass before any category check runs, so the order in which
files are later queried cannot change a verdict.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ..config import SweepConfig
from ..logging_config import get_logger
from ..scanning.imports import read_imports
from ..scanning.models import ImportEdge, SourceFile, categorize
from ..scanning.resolver import PathResolver
from ..scanning.walker import traverse

logger = get_logger(__name__)


class UsedSet:
    """Append-only set of logical paths.

    There is deliberately no removal operation.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: set[str] = set()
        for path in paths:
            self.add(path)

    def add(self, logical_path: str) -> None:
        self._paths.add(logical_path)

    def contains(self, predicate: Callable[[str], bool]) -> bool:
        """True if any member satisfies ``predicate``."""
        return any(predicate(path) for path in self._paths)

    def contains_substring(self, *needles: str) -> bool:
        """True if any member includes any of ``needles`` as a substring."""
        return self.contains(lambda path: any(n in path for n in needles))

    def __contains__(self, logical_path: object) -> bool:
        return logical_path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"UsedSet({len(self._paths)} paths)"


@dataclass(frozen=True)
class TreeSnapshot:
    """Everything the category checks need from the I/O phase."""

    src_root: Path
    files: tuple[SourceFile, ...]
    used: UsedSet


def iter_edges(filepath: Path, resolver: PathResolver) -> Iterator[ImportEdge]:
    """Yield one edge per import specifier found in ``filepath``."""
    origin_dir = filepath.parent
    for specifier in read_imports(filepath):
        yield ImportEdge(
            origin=filepath,
            specifier=specifier,
            resolved=resolver.resolve(specifier, origin_dir),
        )


def build_used_set(
    files: Iterable[Path],
    resolver: PathResolver,
    extensions: Iterable[str] = (".ts", ".tsx"),
) -> UsedSet:
    """Scan every file with a recognised extension and collect its targets."""
    suffixes = tuple(extensions)
    used = UsedSet()
    scanned = 0
    for filepath in files:
        if not filepath.name.endswith(suffixes):
            continue
        scanned += 1
        for edge in iter_edges(filepath, resolver):
            if edge.discarded:
                continue
            used.add(edge.resolved)

    logger.debug(f"Scanned {scanned} source files, {len(used)} logical paths in use")
    return used


def build_snapshot(src_root: Path, config: SweepConfig) -> TreeSnapshot:
    """Walk ``src_root`` once and build the used set from it."""
    paths = list(traverse(src_root, skip_dirs=config.skip_dirs))
    resolver = PathResolver(src_root)
    used = build_used_set(paths, resolver, extensions=config.source_extensions)
    files = tuple(categorize(p, src_root, config) for p in paths)
    return TreeSnapshot(src_root=src_root, files=files, used=used)
