"""Setup exceptions: a project that cannot be swept, or a bad ui-sweep.toml."""

from pathlib import Path
from typing import Any

from .base import UISweepError


class ConfigurationError(UISweepError):
    """The sweep could not start: unreadable ui-sweep.toml or bad settings."""


class InvalidPathError(ConfigurationError):
    """Raised when the project has no usable source root."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot sweep {path}: {reason}", details={"path": path})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised for an unknown or invalid ui-sweep setting."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Bad ui-sweep setting {key} = {value!r}: {reason}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
