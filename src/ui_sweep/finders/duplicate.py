"""DUPLICATE: the same utility module living in both hooks and the UI folder.

The entry file decides which copy is in use. When it imports neither variant
no verdict is given.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ..config import ALIAS_PREFIX
from .models import CategoryResult, SweepContext


class DuplicateFinder:
    name = "duplicate"
    title = "Checking for Duplicate Files..."
    label = "Duplicate"

    def find(self, context: SweepContext) -> CategoryResult:
        config = context.config
        result = CategoryResult(finder=self.name, title=self.title)

        hooks_file = f"{config.hooks_dir}/{config.duplicate_name}"
        ui_file = f"{config.ui_dir}/{config.duplicate_name}"
        if not (context.src_path(hooks_file).is_file() and context.src_path(ui_file).is_file()):
            return result

        result.note(config.duplicate_name, "info", f"Duplicate found: {hooks_file}, {ui_file}")

        entry_text = context.read_entry()
        if entry_text is None:
            return result

        module = PurePosixPath(config.duplicate_name).stem
        hooks_variants = (
            f"{ALIAS_PREFIX}{config.hooks_dir}/{module}",
            f"./{config.hooks_dir}/{module}",
        )
        ui_variants = (
            f"{ALIAS_PREFIX}{config.ui_dir}/{module}",
            f"./{config.ui_dir}/{module}",
        )

        if any(v in entry_text for v in hooks_variants):
            result.note(hooks_file, "used", "is being used")
            result.flag(ui_file, self.label, f"Duplicate of {hooks_file} (hooks version is used)")
        elif any(v in entry_text for v in ui_variants):
            result.note(ui_file, "used", "is being used")
            result.flag(
                hooks_file, self.label, f"Duplicate of {ui_file} (components version is used)"
            )

        return result
