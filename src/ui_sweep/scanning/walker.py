"""Recursive file enumeration for a source root."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..exceptions import DirectoryAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SKIP_DIRS = ("node_modules",)


def traverse(root_dir: Path, skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS) -> Iterator[Path]:
    """Yield every file under ``root_dir`` in directory-listing order.

    Hidden directories (leading ``.``) and ``skip_dirs`` are not entered.
    Each call returns a fresh generator, so a traversal can be restarted.

    Raises:
        DirectoryAccessError: If any directory cannot be listed. Not caught
            here: a partial traversal would make later "not imported" claims
            unsound.
    """
    skip = frozenset(skip_dirs)
    seen: set[Path] = set()
    yield from _walk(Path(root_dir), skip, seen)


def _walk(directory: Path, skip: frozenset[str], seen: set[Path]) -> Iterator[Path]:
    real = directory.resolve()
    if real in seen:
        return
    seen.add(real)

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise DirectoryAccessError(directory, str(e)) from e

    logger.debug(f"Listing {directory} ({len(entries)} entries)")

    for entry in entries:
        if entry.is_dir():
            if entry.name.startswith(".") or entry.name in skip:
                continue
            yield from _walk(entry, skip, seen)
        else:
            yield entry
