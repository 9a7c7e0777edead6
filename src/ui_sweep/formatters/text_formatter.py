"""Human-readable sweep report.

Layout: header, one section per category with its progress lines, a
numbered summary of removal candidates (or a success line), then a fixed
disclaimer. There is no machine-readable variant.
"""

from __future__ import annotations

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..finders.models import Observation, SweepResult
from .base import BaseFormatter

RULE_WIDTH = 60

DISCLAIMER = (
    "UI components from shadcn/ui are often unused until needed",
    "Some components might be used dynamically or conditionally",
    "Always verify before deleting any files!",
    "Check asset usage manually in component files",
)

SUCCESS_MESSAGE = "No unused files found! All files appear to be in use."

_STATUS_STYLE = {
    "unused": ("yellow", "!!"),
    "used": ("green", "ok"),
    "info": ("cyan", "--"),
}


class TextReportFormatter(BaseFormatter):
    """Render a SweepResult as numbered, sectioned text."""

    def render(self, result: SweepResult, console: Optional[Console] = None) -> None:
        console = console or Console()

        console.print("[bold]Analyzing Unused Frontend Files and Folders[/bold]")
        console.print("=" * RULE_WIDTH)

        for index, category in enumerate(result.categories, start=1):
            console.print()
            console.print(f"[bold cyan]{index}. {escape(category.title)}[/bold cyan]")
            for obs in category.observations:
                console.print(self._observation_line(obs))

        console.print()
        console.print("=" * RULE_WIDTH)
        console.print()
        console.print("[bold]Summary of Potentially Unused Files:[/bold]")
        console.print()

        records = result.records
        if not records:
            console.print(f"[bold green]{SUCCESS_MESSAGE}[/bold green]")
            console.print()
        else:
            for number, record in enumerate(records, start=1):
                console.print(f"{number}. [bold]{escape(record.file)}[/bold]")
                console.print(f"   Type: {escape(record.category)}")
                console.print(f"   Reason: {escape(record.reason)}")
                console.print()

        console.print("[bold]Notes:[/bold]")
        for line in DISCLAIMER:
            console.print(f"   - {escape(line)}")

    def format(self, result: SweepResult) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer, width=200, color_system=None, highlight=False, emoji=False
        )
        self.render(result, console)
        return buffer.getvalue()

    @staticmethod
    def _observation_line(obs: Observation) -> str:
        style, marker = _STATUS_STYLE[obs.status]
        if obs.status == "info":
            return f"   {marker} [{style}]{escape(obs.message)}[/{style}]"
        return f"   {marker} [{style}]{escape(obs.file)}[/{style}] - {escape(obs.message)}"
