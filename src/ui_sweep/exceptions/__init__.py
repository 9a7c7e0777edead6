"""Exception hierarchy for UI Sweep."""

from .analysis import AnalysisError, DirectoryAccessError, FileAccessError
from .base import UISweepError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "UISweepError",
    "AnalysisError",
    "FileAccessError",
    "DirectoryAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
