"""HOOK: hooks nothing imports. Reports confirmations as well as findings."""

from __future__ import annotations

from ..scanning.models import FileCategory
from .models import CategoryResult, SweepContext


class HookFinder:
    name = "hook"
    title = "Checking Hooks..."
    label = "Hook"
    reason = "Not imported in any file"

    def find(self, context: SweepContext) -> CategoryResult:
        config = context.config
        result = CategoryResult(finder=self.name, title=self.title)

        for source in context.files_in(FileCategory.HOOK, config.source_extensions):
            if context.used.contains_substring(f"{config.hooks_dir}/{source.stem}"):
                result.note(source.name, "used", "is being used")
                continue

            result.note(source.name, "unused", "NOT imported anywhere")
            result.flag(f"{config.hooks_dir}/{source.name}", self.label, self.reason)

        return result
