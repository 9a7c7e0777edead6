"""Tests for finders/ui_component.py."""

from ui_sweep.finders import UIComponentFinder


class TestUIComponentFinder:
    def test_unimported_component_flagged(self, make_context):
        context = make_context({
            "src/App.tsx": "export default function App() { return null; }\n",
            "src/components/ui/carousel.tsx": "export const Carousel = () => null;\n",
        })
        result = UIComponentFinder().find(context)

        assert len(result.records) == 1
        record = result.records[0]
        assert record.file == "components/ui/carousel.tsx"
        assert record.category == "UI Component"
        assert record.reason == "Not imported in any file"

    def test_alias_import_counts(self, make_context):
        context = make_context({
            "src/App.tsx": 'import { Button } from "@/components/ui/button";\n',
            "src/components/ui/button.tsx": "",
        })
        assert UIComponentFinder().find(context).records == []

    def test_relative_import_from_page_counts(self, make_context):
        context = make_context({
            "src/pages/Foo.tsx": 'import { Button } from "../components/ui/button";\n',
            "src/components/ui/button.tsx": "",
        })
        assert UIComponentFinder().find(context).records == []

    def test_loose_ui_tail_match_counts(self, make_context):
        """An import resolving to anything containing "ui/<stem>" keeps the file."""
        context = make_context({
            "src/App.tsx": 'import { Badge } from "@/ui/badge";\n',
            "src/components/ui/badge.tsx": "",
        })
        assert UIComponentFinder().find(context).records == []

    def test_reports_only_negative_findings(self, make_context):
        context = make_context({
            "src/App.tsx": 'import { Button } from "@/components/ui/button";\n',
            "src/components/ui/button.tsx": "",
            "src/components/ui/sheet.tsx": "",
        })
        result = UIComponentFinder().find(context)
        assert [o.status for o in result.observations] == ["unused"]
        assert result.observations[0].file == "sheet.tsx"

    def test_internal_import_between_components_counts(self, make_context):
        context = make_context({
            "src/components/ui/toaster.tsx": 'import { Toast } from "./toast";\n',
            "src/components/ui/toast.tsx": "",
        })
        flagged = [r.file for r in UIComponentFinder().find(context).records]
        assert flagged == ["components/ui/toaster.tsx"]

    def test_ignores_non_source_files(self, make_context):
        context = make_context({
            "src/components/ui/README.md": "docs\n",
            "src/components/ui/theme.css": "",
        })
        assert UIComponentFinder().find(context).records == []

    def test_missing_ui_dir_is_silent(self, make_context):
        context = make_context({"src/App.tsx": ""})
        result = UIComponentFinder().find(context)
        assert result.records == []
        assert result.observations == []
