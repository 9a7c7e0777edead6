"""Public API for UI Sweep.

Example:
    >>> from ui_sweep import sweep
    >>> result = sweep("/path/to/frontend")
    >>> [r.file for r in result.records]
    ['components/ui/carousel.tsx', 'hooks/useDebounce.ts']
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .config import SweepConfig, load_config
from .exceptions import InvalidPathError
from .finders import SweepContext, SweepResult, get_default_finders
from .graph import build_snapshot
from .logging_config import get_logger

logger = get_logger(__name__)


def sweep(
    project_root: str | Path = ".",
    config: Optional[SweepConfig] = None,
    finders: Optional[Sequence] = None,
    **overrides,
) -> SweepResult:
    """Scan a frontend project and classify its files.

    Two strictly ordered phases: one full walk of the source root builds the
    used set, then every finder runs against that finished snapshot. Nothing
    on disk is written, moved or deleted.

    Args:
        project_root: Directory holding the source folder (default: cwd)
        config: Ready-made configuration; loaded from ``project_root`` if None
        finders: Finders to run, in report order (default: all categories)
        **overrides: Configuration overrides passed to load_config

    Returns:
        SweepResult with one CategoryResult per finder

    Raises:
        InvalidPathError: If the source root does not exist
        DirectoryAccessError: If any directory under it cannot be listed
    """
    root = Path(project_root).resolve()
    if config is None:
        config = load_config(project_root=root, **overrides)

    src_root = root / config.source_dir
    if not src_root.is_dir():
        raise InvalidPathError(src_root, "source directory not found")

    logger.info(f"Sweeping {src_root}")
    snapshot = build_snapshot(src_root, config)
    context = SweepContext(config=config, snapshot=snapshot)

    categories = []
    for finder in finders if finders is not None else get_default_finders():
        category = finder.find(context)
        logger.debug(
            f"{finder.name}: {len(category.records)} candidates, "
            f"{len(category.observations)} observations"
        )
        categories.append(category)

    return SweepResult(
        categories=categories,
        files_walked=len(snapshot.files),
        files_scanned=sum(
            1 for f in snapshot.files if f.name.endswith(config.source_extensions)
        ),
        paths_in_use=len(snapshot.used),
    )
