"""Scan-time exceptions: unreadable files and directories."""

from pathlib import Path

from .base import UISweepError


class AnalysisError(UISweepError):
    """Base class for errors raised while scanning the source tree."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class DirectoryAccessError(AnalysisError):
    """Raised when a directory cannot be listed during traversal.

    Always fatal: a partial tree cannot back a "not imported anywhere" claim.
    """

    def __init__(self, dirpath: Path, reason: str):
        super().__init__(
            f"Cannot list directory: {dirpath}",
            details={"dirpath": str(dirpath), "reason": reason},
        )
        self.dirpath = dirpath
        self.reason = reason
