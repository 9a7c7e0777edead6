"""STYLESHEET: the app stylesheet the entry file never references."""

from __future__ import annotations

from .models import CategoryResult, SweepContext


class StylesheetFinder:
    name = "stylesheet"
    label = "Stylesheet"

    def find(self, context: SweepContext) -> CategoryResult:
        config = context.config
        result = CategoryResult(finder=self.name, title=f"Checking {config.stylesheet}...")

        if not context.src_path(config.stylesheet).is_file():
            return result

        entry_text = context.read_entry()
        if entry_text is None:
            return result

        if config.stylesheet in entry_text:
            result.note(config.stylesheet, "used", "is imported")
        else:
            result.note(config.stylesheet, "unused", f"is NOT imported in {config.entry_file}")
            result.flag(config.stylesheet, self.label, f"Not imported in {config.entry_file}")

        return result
