"""Text-based import extraction for TypeScript/React sources.

This is a deliberate approximation. Only ``import <clause> from '<module>'``
is recognised; dynamic ``import()``, side-effect imports without ``from`` and
``export ... from`` re-exports are missed, so a real usage can go unseen.
"""

import re
from pathlib import Path
from typing import List

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

# The clause may span lines (``import {\n  a,\n  b\n} from "x"``) but not cross
# a statement terminator or another import/export keyword, so a side-effect
# import or a comment mentioning "import" never pairs with a later re-export.
IMPORT_FROM = re.compile(
    r"""\bimport\s+(?:(?!\b(?:import|export)\b)[^;])*?\s+from\s+(['"])([^'"\n]+)\1"""
)


def extract_imports(content: str) -> List[str]:
    """Return the module specifiers of every import-from statement, in order."""
    return [match.group(2) for match in IMPORT_FROM.finditer(content)]


def read_source(filepath: Path) -> str:
    """Read a source file as text.

    Raises:
        FileAccessError: If the file cannot be opened or read
    """
    try:
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot read file: {e}")


def read_imports(filepath: Path) -> List[str]:
    """Extract import specifiers from a file; unreadable files yield nothing."""
    try:
        content = read_source(filepath)
    except FileAccessError as e:
        logger.debug(f"Skipping unreadable file: {e}")
        return []
    return extract_imports(content)
