"""Configuration loading for UI Sweep.

The tool follows the conventions of a Vite/shadcn style React frontend:
sources under ``src/``, shared components in ``src/components/ui``, the
application composed in ``src/App.tsx``. Configuration sources are merged in
priority order:
    1. Defaults (defined in SweepConfig)
    2. Project config (<project root>/ui-sweep.toml)
    3. Explicit config file
    4. Keyword overrides

Example:
    >>> config = load_config(entry_file="main.tsx")
    >>> config.entry_file
    'main.tsx'
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Fixed import alias: "@/x" always means "<source_dir>/x"
ALIAS_PREFIX = "@/"

PROJECT_CONFIG_NAME = "ui-sweep.toml"


@dataclass(frozen=True)
class SweepConfig:
    """Layout conventions of the frontend being swept.

    Attributes:
        Source tree:
            source_dir: Source root folder, relative to the project root
            entry_file: Top-level composition file, relative to source_dir
            source_extensions: Extensions scanned for import statements
            skip_dirs: Directory names never descended into (hidden
                directories are always skipped)

        Category folders (relative to source_dir):
            ui_dir: Shared UI components
            hooks_dir: Hooks
            pages_dir: Routed pages
            assets_dir: Static assets (counted only)

        Single-file checks:
            stylesheet: Stylesheet expected to be imported by the entry file
            duplicate_name: File name that exists in both hooks_dir and ui_dir
            page_extensions: Extensions of page files

        Output control:
            verbosity: Logging verbosity level
    """

    source_dir: str = "src"
    entry_file: str = "App.tsx"
    source_extensions: tuple[str, ...] = (".ts", ".tsx")
    skip_dirs: tuple[str, ...] = ("node_modules",)

    ui_dir: str = "components/ui"
    hooks_dir: str = "hooks"
    pages_dir: str = "pages"
    assets_dir: str = "assets"

    stylesheet: str = "App.css"
    duplicate_name: str = "use-toast.ts"
    page_extensions: tuple[str, ...] = (".tsx",)

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("source_dir", "entry_file", "ui_dir", "hooks_dir", "pages_dir",
                     "assets_dir", "stylesheet", "duplicate_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidConfigError(name, value, "must be a non-empty string")
            if value.startswith("/") or "\\" in value:
                raise InvalidConfigError(name, value, "must be a relative POSIX path")

        for name in ("source_extensions", "page_extensions"):
            value = getattr(self, name)
            if not value or not all(isinstance(e, str) and e.startswith(".") for e in value):
                raise InvalidConfigError(name, value, "must list extensions like '.tsx'")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")

    @property
    def ui_leaf(self) -> str:
        """Last segment of ui_dir, used for the looser alias match."""
        return self.ui_dir.rstrip("/").rsplit("/", 1)[-1]


def load_config(
    project_root: Optional[Path] = None,
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> SweepConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        project_root: Directory searched for ``ui-sweep.toml``
        config_file: Explicit TOML file (must exist)
        **overrides: Field overrides, highest priority

    Returns:
        Validated SweepConfig

    Raises:
        ConfigurationError: If a config file is missing or malformed
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    if project_root is not None:
        project_config = Path(project_root) / PROJECT_CONFIG_NAME
        if project_config.exists():
            merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    known = {f.name for f in fields(SweepConfig)}
    for key, value in list(merged.items()):
        if key not in known:
            raise InvalidConfigError(key, value, "unknown setting")
        # TOML arrays arrive as lists
        if isinstance(value, list):
            merged[key] = tuple(value)

    return SweepConfig(**merged)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, returning the ``[ui-sweep]`` table if present."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    table = data.get("ui-sweep", data)
    if not isinstance(table, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [ui-sweep] must be a table")
    return dict(table)
