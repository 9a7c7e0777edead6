"""Source tree scanning: traversal, import extraction, specifier resolution."""

from .imports import extract_imports, read_imports
from .models import FileCategory, ImportEdge, SourceFile, categorize
from .resolver import PathResolver
from .walker import traverse

__all__ = [
    "FileCategory",
    "ImportEdge",
    "PathResolver",
    "SourceFile",
    "categorize",
    "extract_imports",
    "read_imports",
    "traverse",
]
