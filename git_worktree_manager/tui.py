"""Interactive TUI for git-worktree-manager using Textual."""

import asyncio
from typing import List, Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static
from rich.text import Text

from .__version__ import __version__
from .constants import COLUMNS, LEGEND_TEXT
from .core import WorktreeManager
from .exceptions import WorktreeManagerError
from .formatters import format_flags, format_summary, format_worktree_name
from .models.worktree import WorktreeRecord
from .utils.logging import get_logger

logger = get_logger(__name__)


class WorktreeManagerApp(App):
    """Interactive worktree browser."""

    TITLE = "Git Worktree Manager"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    DataTable {
        height: 1fr;
    }

    #status-bar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("o", "open_selected", "Open"),
        Binding("s", "sync_selected", "Sync Config"),
        Binding("r", "refresh", "Refresh"),
        Binding("l", "show_legend", "Legend"),
    ]

    def __init__(self, manager: WorktreeManager):
        super().__init__()
        self.manager = manager
        self.worktrees: List[WorktreeRecord] = []

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(show_clock=False)
        yield DataTable(id="worktree-table", cursor_type="row", zebra_stripes=True)
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table and load worktrees."""
        table = self.query_one(DataTable)
        for col in COLUMNS:
            table.add_column(col.label, width=col.width or None, key=col.key)
        self.refresh_data()

    def _populate_table(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        for worktree in self.worktrees:
            style = "bold" if worktree.is_current else ""
            table.add_row(
                Text(format_worktree_name(worktree), style=style),
                Text(worktree.branch, style="dim"),
                format_flags(worktree),
                worktree.path,
                key=worktree.path,
            )

    def _update_status(self, message: Optional[str] = None) -> None:
        status = self.query_one("#status-bar", Static)
        if message is None:
            message = f"{len(self.worktrees)} worktrees  |  enter/o: open  s: sync config  r: refresh"
        status.update(message)

    def _selected_worktree(self) -> Optional[WorktreeRecord]:
        table = self.query_one(DataTable)
        if not self.worktrees or table.cursor_row is None:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return next((wt for wt in self.worktrees if wt.path == row_key.value), None)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Open a worktree when its row is selected (enter or click)."""
        self.action_open_selected()

    def action_open_selected(self) -> None:
        worktree = self._selected_worktree()
        if worktree is None:
            return
        if worktree.is_current:
            self.notify("Already in this worktree", severity="warning")
            return
        self.open_worktree(worktree)

    def action_sync_selected(self) -> None:
        worktree = self._selected_worktree()
        if worktree is None:
            return
        if worktree.is_current:
            self.notify("Cannot sync the current worktree into itself", severity="warning")
            return
        self.sync_worktree(worktree)

    def action_show_legend(self) -> None:
        self.notify(LEGEND_TEXT.strip(), title="Legend", timeout=8)

    def action_refresh(self) -> None:
        """Trigger refresh of the worktree list."""
        self.refresh_data()

    @work(exclusive=True, thread=False)
    async def refresh_data(self) -> None:
        """Reload the worktree list in the background."""
        table = self.query_one(DataTable)
        table.loading = True
        try:
            self.worktrees = await asyncio.to_thread(self.manager.list_worktrees)
            self._populate_table()
            self._update_status()
            if not self.worktrees:
                self.notify("No worktrees found", severity="warning")
        finally:
            table.loading = False

    @work(thread=False)
    async def open_worktree(self, worktree: WorktreeRecord) -> None:
        """Sync config into a worktree and open it."""
        try:
            report = await asyncio.to_thread(self.manager.open, worktree.path)
        except WorktreeManagerError as e:
            logger.error(f"Error opening {worktree.path}: {e}")
            self.notify(str(e), severity="error")
            return
        if report is not None:
            self._update_status(f"{worktree.display_name}: {format_summary(report)}")
        self.notify(f"✓ Opening {worktree.display_name}", severity="information")

    @work(thread=False)
    async def sync_worktree(self, worktree: WorktreeRecord) -> None:
        """Sync config from the current worktree into another one."""
        try:
            report = await asyncio.to_thread(self.manager.sync, worktree.path)
        except WorktreeManagerError as e:
            logger.error(f"Error syncing {worktree.path}: {e}")
            self.notify(str(e), severity="error")
            return
        severity = "warning" if report.failures() else "information"
        self._update_status(f"{worktree.display_name}: {format_summary(report)}")
        self.notify(f"{worktree.display_name}: {format_summary(report)}", severity=severity)
