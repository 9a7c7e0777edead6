"""PAGE: routed pages the entry file never mentions.

Bypasses the used set. Route tables can reference a page component by name
outside any import the extractor recognises, so the check is a plain
substring test of the page stem against the entry file's text.
"""

from __future__ import annotations

from ..scanning.models import FileCategory
from .models import CategoryResult, SweepContext


class PageFinder:
    name = "page"
    title = "Checking Pages..."
    label = "Page"

    def find(self, context: SweepContext) -> CategoryResult:
        config = context.config
        result = CategoryResult(finder=self.name, title=self.title)

        pages = context.files_in(FileCategory.PAGE, config.page_extensions)
        if not pages:
            return result

        entry_text = context.read_entry()
        if entry_text is None:
            return result

        for source in pages:
            if source.stem in entry_text:
                result.note(source.name, "used", "is used in routes")
                continue

            result.note(source.name, "unused", f"NOT used in {config.entry_file} routes")
            result.flag(
                f"{config.pages_dir}/{source.name}",
                self.label,
                f"Not used in {config.entry_file} routes",
            )

        return result
