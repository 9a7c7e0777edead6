"""Shared fixtures: throwaway frontend trees built under tmp_path."""

from pathlib import Path

import pytest

from ui_sweep.config import SweepConfig
from ui_sweep.finders import SweepContext
from ui_sweep.graph import build_snapshot


def write_tree(root: Path, files: dict) -> Path:
    """Write ``{relative path: content}`` under ``root`` and return root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    (root / "src").mkdir(exist_ok=True)
    return root


@pytest.fixture
def make_project(tmp_path):
    """Factory: make_project({"src/App.tsx": "..."}) -> project root."""

    def _make(files: dict) -> Path:
        return write_tree(tmp_path, files)

    return _make


@pytest.fixture
def make_context(make_project):
    """Factory: build the full SweepContext for a tree in one call."""

    def _make(files: dict, config: SweepConfig = None) -> SweepContext:
        root = make_project(files)
        config = config or SweepConfig()
        snapshot = build_snapshot(root / config.source_dir, config)
        return SweepContext(config=config, snapshot=snapshot)

    return _make


@pytest.fixture
def healthy_project():
    """A tree where every UI component, hook and page is referenced."""
    return {
        "src/App.tsx": (
            'import { Toaster } from "@/components/ui/toaster";\n'
            'import { useToast } from "@/hooks/use-toast";\n'
            'import Index from "./pages/Index";\n'
            'import ContactPage from "./pages/ContactPage";\n'
            'import "./App.css";\n'
            "\n"
            "const App = () => (\n"
            "  <Routes>\n"
            '    <Route path="/" element={<Index />} />\n'
            '    <Route path="/contact" element={<ContactPage />} />\n'
            "  </Routes>\n"
            ");\n"
        ),
        "src/App.css": "#root { margin: 0 auto; }\n",
        "src/components/ui/toaster.tsx": 'import { Toast } from "./toast";\n',
        "src/components/ui/toast.tsx": "export const Toast = () => null;\n",
        "src/hooks/use-toast.ts": "export function useToast() {}\n",
        "src/pages/Index.tsx": 'import { Button } from "@/components/ui/button";\n',
        "src/pages/ContactPage.tsx": (
            "import {\n"
            "  Card,\n"
            "  CardContent,\n"
            '} from "../components/ui/card";\n'
        ),
        "src/components/ui/button.tsx": "export const Button = () => null;\n",
        "src/components/ui/card.tsx": "export const Card = () => null;\n",
    }
