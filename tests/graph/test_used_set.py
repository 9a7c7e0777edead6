"""Tests for graph/used_set.py - the append-only used set."""

from ui_sweep.config import SweepConfig
from ui_sweep.graph.used_set import UsedSet, build_snapshot, build_used_set, iter_edges
from ui_sweep.scanning.models import FileCategory
from ui_sweep.scanning.resolver import PathResolver
from ui_sweep.scanning.walker import traverse


class TestUsedSet:
    def test_add_is_idempotent(self):
        used = UsedSet()
        used.add("src/hooks/useAuth")
        used.add("src/hooks/useAuth")
        assert len(used) == 1
        assert "src/hooks/useAuth" in used

    def test_contains_predicate(self):
        used = UsedSet(["src/components/ui/button", "src/pages/Index"])
        assert used.contains(lambda p: p.endswith("/Index"))
        assert not used.contains(lambda p: p.startswith("lib/"))

    def test_contains_substring_any_needle(self):
        used = UsedSet(["src/components/ui/button"])
        assert used.contains_substring("ui/button")
        assert used.contains_substring("nope", "components/ui/button")
        assert not used.contains_substring("ui/badge")

    def test_substring_match_is_imprecise(self):
        """A stem that is a prefix of another import's path counts as used."""
        used = UsedSet(["src/components/ui/card-list"])
        assert used.contains_substring("components/ui/card")

    def test_empty(self):
        used = UsedSet()
        assert len(used) == 0
        assert not used.contains_substring("anything")

    def test_no_removal_operation(self):
        used = UsedSet(["src/a"])
        for name in ("remove", "discard", "pop", "clear"):
            assert not hasattr(used, name)


class TestBuildUsedSet:
    def test_collects_relative_and_alias_targets(self, tmp_path, make_project):
        make_project({
            "src/App.tsx": (
                "import React from 'react';\n"
                "import Index from './pages/Index';\n"
                "import { useAuth } from '@/hooks/useAuth';\n"
            ),
            "src/pages/Index.tsx": "import { Button } from '../components/ui/button';\n",
        })
        src = tmp_path / "src"
        used = build_used_set(traverse(src), PathResolver(src))
        assert set(used) == {"src/pages/Index", "src/hooks/useAuth", "src/components/ui/button"}

    def test_non_source_files_not_scanned(self, tmp_path, make_project):
        make_project({
            "src/index.css": "import x from './from-css';\n",
            "src/notes.md": "import y from './from-md';\n",
        })
        src = tmp_path / "src"
        assert len(build_used_set(traverse(src), PathResolver(src))) == 0

    def test_unresolvable_targets_still_recorded(self, tmp_path, make_project):
        make_project({"src/App.tsx": "import Ghost from './components/Ghost';\n"})
        src = tmp_path / "src"
        assert "src/components/Ghost" in build_used_set(traverse(src), PathResolver(src))

    def test_iter_edges_keeps_discarded(self, tmp_path, make_project):
        make_project({"src/App.tsx": "import React from 'react';\nimport A from './A';\n"})
        src = tmp_path / "src"
        edges = list(iter_edges(src / "App.tsx", PathResolver(src)))
        assert [e.specifier for e in edges] == ["react", "./A"]
        assert [e.resolved for e in edges] == [None, "src/A"]


class TestBuildSnapshot:
    def test_snapshot_categorises_files(self, tmp_path, make_project):
        make_project({
            "src/App.tsx": "import { Button } from '@/components/ui/button';\n",
            "src/components/ui/button.tsx": "",
            "src/hooks/useAuth.ts": "",
        })
        snapshot = build_snapshot(tmp_path / "src", SweepConfig())
        categories = {f.name: f.category for f in snapshot.files}
        assert categories["button.tsx"] is FileCategory.UI_COMPONENT
        assert categories["useAuth.ts"] is FileCategory.HOOK
        assert categories["App.tsx"] is FileCategory.OTHER
        assert "src/components/ui/button" in snapshot.used
