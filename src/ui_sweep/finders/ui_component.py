"""UI_COMPONENT: shared components nothing imports.

Only negative findings are reported; a used component produces no line.
"""

from __future__ import annotations

from ..scanning.models import FileCategory
from .models import CategoryResult, SweepContext


class UIComponentFinder:
    """Flags files in the shared UI folder that no import resolves to."""

    name = "ui_component"
    title = "Checking UI Components..."
    label = "UI Component"
    reason = "Not imported in any file"

    def find(self, context: SweepContext) -> CategoryResult:
        config = context.config
        result = CategoryResult(finder=self.name, title=self.title)

        for source in context.files_in(FileCategory.UI_COMPONENT, config.source_extensions):
            # The looser "ui/<stem>" needle catches alias paths that kept only the tail
            if context.used.contains_substring(
                f"{config.ui_dir}/{source.stem}",
                f"{config.ui_leaf}/{source.stem}",
            ):
                continue

            result.note(source.name, "unused", "NOT imported anywhere")
            result.flag(f"{config.ui_dir}/{source.name}", self.label, self.reason)

        return result
