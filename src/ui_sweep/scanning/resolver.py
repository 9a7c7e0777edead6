"""Specifier resolution to root-relative logical paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..config import ALIAS_PREFIX

RELATIVE_PREFIXES = ("./", "../")


class PathResolver:
    """Turns raw import specifiers into logical paths like ``src/hooks/useAuth``.

    Both addressing schemes land on the same form: relative specifiers are
    normalised against the importing directory, aliased ones have ``@/``
    swapped for the source root folder name. Bare package names resolve to
    None. Nothing here checks that the target exists.
    """

    def __init__(self, src_root: Path):
        self.src_root = Path(src_root)
        self.root_name = self.src_root.name
        self._root_posix = _normalize(self.src_root)

    def resolve(self, specifier: str, origin_dir: Path) -> Optional[str]:
        if specifier.startswith(RELATIVE_PREFIXES):
            return self._resolve_relative(specifier, origin_dir)
        if specifier.startswith(ALIAS_PREFIX):
            return f"{self.root_name}/{specifier[len(ALIAS_PREFIX):]}"
        return None

    def _resolve_relative(self, specifier: str, origin_dir: Path) -> str:
        target = _normalize(Path(origin_dir) / specifier)
        if target == self._root_posix:
            return self.root_name
        if target.startswith(self._root_posix + "/"):
            return self.root_name + target[len(self._root_posix):]
        # Escapes the source root: keep the normalised form anyway
        return target.lstrip("/")


def _normalize(path: Path) -> str:
    return os.path.normpath(os.path.abspath(path)).replace("\\", "/")
