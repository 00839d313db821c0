"""Display and formatting service for worktrees and sync results"""
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from git_worktree_manager.models.sync import SyncReport
from git_worktree_manager.models.worktree import WorktreeRecord
from git_worktree_manager.constants import COLUMNS, LEGEND_TEXT, SYNC_COLUMNS
from git_worktree_manager.formatters import (
    format_decision,
    format_decision_style,
    format_detail,
    format_flags,
    format_summary,
    format_worktree_name,
)


class DisplayService:
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def display_worktree_table(self, worktrees: List[WorktreeRecord], show_legend: bool = False) -> None:
        """Display a table of worktrees."""
        if not worktrees:
            self.console.print("[yellow]No worktrees found[/yellow]")
            return

        table = Table()
        for col in COLUMNS:
            table.add_column(col.label, min_width=col.width or None)

        for worktree in worktrees:
            table.add_row(
                format_worktree_name(worktree),
                worktree.branch,
                format_flags(worktree),
                worktree.path,
                style="bold" if worktree.is_current else None,
            )

        self.console.print(table)
        if show_legend:
            self.console.print(LEGEND_TEXT)

    def display_sync_report(self, report: SyncReport, title: Optional[str] = None) -> None:
        """Display per-entry results of a sync.

        Entries already linked are only listed in verbose mode.
        """
        heading = title or str(report.target_config_dir)
        prefix = "[dim](dry run)[/dim] " if report.dry_run else ""
        self.console.print(f"{prefix}[bold]{heading}[/bold]: {format_summary(report)}")

        rows = [
            result for result in report.results
            if self.verbose or format_decision_style(result) is not None
        ]
        if not rows:
            return

        table = Table()
        for col in SYNC_COLUMNS:
            table.add_column(col.label, min_width=col.width or None)
        for result in rows:
            table.add_row(
                result.name,
                format_decision(result, dry_run=report.dry_run),
                format_detail(result),
                style=format_decision_style(result),
            )
        self.console.print(table)

    def display_sync_errors(self, errors: dict) -> None:
        for path, message in errors.items():
            self.console.print(f"[red]✗ {path}: {message}[/red]")
