"""Core functionality for git-worktree-manager"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Tuple, Union

from git_worktree_manager.config import Config
from git_worktree_manager.exceptions import ConfigSyncError, GitOperationError, WorktreeNotFoundError
from git_worktree_manager.models.sync import SyncReport
from git_worktree_manager.models.worktree import WorktreeRecord
from git_worktree_manager.services.config_sync import ConfigReconciler
from git_worktree_manager.services.git import WorktreeListRunner, WorktreeService
from git_worktree_manager.services.opener import Launcher, WorkspaceOpener
from git_worktree_manager.utils.filesystem import LocalFileSystem
from git_worktree_manager.utils.logging import get_logger
from git_worktree_manager.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class WorktreeManager:
    """Lists a repository's worktrees and shares IDE config between them."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict, None] = None,
        runner: Optional[WorktreeListRunner] = None,
        launcher: Optional[Launcher] = None,
        filesystem: Optional[LocalFileSystem] = None,
    ):
        """Initialize WorktreeManager.

        Args:
            repo_path: Path inside the git repository
            config: Configuration dict or Config object
            runner: Override for running `git worktree list --porcelain`
            launcher: Override for starting the IDE process
            filesystem: Override for filesystem access during sync
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config or Config()

        self.worktree_service = WorktreeService(repo_path, runner=runner)
        self.reconciler = ConfigReconciler(
            policy=self.config.build_policy(),
            filesystem=filesystem,
            config_dir_name=self.config.config_dir_name,
        )
        self.opener = WorkspaceOpener(self.reconciler, self.config.open_command, launcher=launcher)

    def list_worktrees(self) -> List[WorktreeRecord]:
        """All worktrees of the repository; empty if git could not list them."""
        return self.worktree_service.list_worktrees()

    def find_worktree(self, name_or_path: str) -> WorktreeRecord:
        """Find a worktree by name or path.

        Raises:
            WorktreeNotFoundError: If no worktree matches
        """
        worktree = self.worktree_service.find_worktree(name_or_path)
        if worktree is None:
            raise WorktreeNotFoundError(name_or_path)
        return worktree

    def current_root(self) -> str:
        """Root of the worktree repo_path lives in.

        Raises:
            GitOperationError: If repo_path is not inside a git worktree
        """
        root = self.worktree_service.resolve_root()
        if root is None:
            raise GitOperationError("resolve_root", f"{self.repo_path} is not inside a git worktree")
        return root

    def _resolve_source(self, source: Optional[str]) -> str:
        """Source worktree root: a named worktree, a plain path, or the current worktree."""
        if source is None:
            return self.current_root()
        worktree = self.worktree_service.find_worktree(source)
        if worktree is not None:
            return worktree.path
        return os.path.abspath(source)

    def _resolve_target(self, target: str) -> str:
        worktree = self.worktree_service.find_worktree(target)
        if worktree is not None:
            return worktree.path
        if os.path.isdir(target):
            return os.path.abspath(target)
        raise WorktreeNotFoundError(target)

    def sync(self, target: str, source: Optional[str] = None, dry_run: Optional[bool] = None) -> SyncReport:
        """Share config from source (default: current worktree) into target.

        Args:
            target: Worktree name or path to sync into
            source: Worktree name or path to sync from
            dry_run: Report without changing anything (default: config.dry_run)

        Returns:
            SyncReport for the target

        Raises:
            WorktreeNotFoundError: If target is neither a worktree nor a directory
            ConfigSyncError: If the target config directory cannot be created
        """
        if dry_run is None:
            dry_run = self.config.dry_run
        source_root = self._resolve_source(source)
        target_root = self._resolve_target(target)
        return self.reconciler.reconcile(source_root, target_root, dry_run=dry_run)

    def sync_all(
        self, source: Optional[str] = None, dry_run: Optional[bool] = None
    ) -> Tuple[Dict[str, SyncReport], Dict[str, str]]:
        """Share config from source into every other worktree.

        Targets are distinct worktree roots, so they are reconciled in parallel
        unless config.sequential is set.

        Returns:
            Tuple of (reports by worktree path, error messages by worktree path)
        """
        if dry_run is None:
            dry_run = self.config.dry_run
        source_root = self._resolve_source(source)
        source_real = os.path.realpath(source_root)
        targets = [
            wt.path for wt in self.list_worktrees()
            if os.path.realpath(wt.path) != source_real
        ]

        reports: Dict[str, SyncReport] = {}
        errors: Dict[str, str] = {}
        if not targets:
            logger.info("No other worktrees to sync")
            return reports, errors

        if self.config.sequential or self.config.debug:
            for target in targets:
                try:
                    reports[target] = self.reconciler.reconcile(source_root, target, dry_run=dry_run)
                except ConfigSyncError as e:
                    logger.error(f"Could not sync {target}: {e}")
                    errors[target] = str(e)
            return reports, errors

        workers = get_optimal_worker_count(self.config.workers, task_count=len(targets))
        logger.debug(f"Syncing {len(targets)} worktrees with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self.reconciler.reconcile, source_root, target, dry_run): target
                for target in targets
            }
            for future in as_completed(futures):
                target = futures[future]
                try:
                    reports[target] = future.result()
                except ConfigSyncError as e:
                    logger.error(f"Could not sync {target}: {e}")
                    errors[target] = str(e)

        return reports, errors

    def open(self, target: str) -> Optional[SyncReport]:
        """Share config from the current worktree into target, then open it.

        Raises:
            WorktreeNotFoundError: If target is not a worktree of this repository
            OpenWorktreeError: If the open command cannot be started
        """
        worktree = self.find_worktree(target)
        try:
            source_root = self.current_root()
        except GitOperationError as e:
            logger.warning(f"Opening without config sync: {e}")
            source_root = None
        return self.opener.open(worktree, source_root)
