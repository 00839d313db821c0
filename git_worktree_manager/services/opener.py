"""Opening a worktree as a new IDE workspace."""

import subprocess
from typing import Callable, List, Optional, Sequence

from git_worktree_manager.exceptions import ConfigSyncError, OpenWorktreeError
from git_worktree_manager.models.sync import SyncReport
from git_worktree_manager.models.worktree import WorktreeRecord
from git_worktree_manager.services.config_sync import ConfigReconciler
from git_worktree_manager.utils.logging import get_logger

logger = get_logger(__name__)

Launcher = Callable[[List[str]], None]


def launch_detached(args: List[str]) -> None:
    """Start a process without waiting for it."""
    subprocess.Popen(
        args,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class WorkspaceOpener:
    """Shares config into a worktree, then opens it with the IDE command."""

    def __init__(
        self,
        reconciler: ConfigReconciler,
        open_command: Sequence[str],
        launcher: Optional[Launcher] = None,
    ):
        self.reconciler = reconciler
        self.open_command = list(open_command)
        self.launcher = launcher or launch_detached

    def open(self, worktree: WorktreeRecord, source_root: Optional[str] = None) -> Optional[SyncReport]:
        """Open a worktree, syncing config from source_root first.

        A failed sync is logged and does not prevent opening.

        Args:
            worktree: Worktree to open
            source_root: Worktree root to share config from, None to skip syncing

        Returns:
            The sync report, or None if no sync happened

        Raises:
            OpenWorktreeError: If the open command cannot be started
        """
        report = None
        if source_root is not None and source_root != worktree.path:
            try:
                report = self.reconciler.reconcile(source_root, worktree.path)
            except ConfigSyncError as e:
                logger.warning(f"Opening {worktree.path} without shared config: {e}")

        args = self.open_command + [worktree.path]
        try:
            self.launcher(args)
        except OSError as e:
            raise OpenWorktreeError(worktree.path, str(e)) from e

        logger.info(f"Opened worktree {worktree.display_name} with {self.open_command[0]}")
        return report
