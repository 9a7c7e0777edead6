"""ASSETS: counted, never judged.

Text matching over source files cannot prove an image or font is unused,
so this category only reports how many entries need a manual look.
"""

from __future__ import annotations

from ..exceptions import DirectoryAccessError
from .models import CategoryResult, SweepContext


class AssetFinder:
    name = "assets"
    title = "Checking Assets..."

    def find(self, context: SweepContext) -> CategoryResult:
        result = CategoryResult(finder=self.name, title=self.title)

        assets_dir = context.src_path(context.config.assets_dir)
        if not assets_dir.is_dir():
            return result

        try:
            count = sum(1 for _ in assets_dir.iterdir())
        except OSError as e:
            raise DirectoryAccessError(assets_dir, str(e)) from e

        result.note(context.config.assets_dir, "info", f"Found {count} asset files")
        result.note(
            context.config.assets_dir, "info", "Asset usage requires manual checking in components"
        )
        return result
