"""Worktree discovery service for git-worktree-manager."""

import logging
import os
from typing import Callable, List, Optional, Sequence, Tuple

import git

from git_worktree_manager.models.worktree import WorktreeRecord
from git_worktree_manager.services.git.porcelain import PorcelainParser
from git_worktree_manager.utils.logging import get_logger

logger = get_logger(__name__)

# (exit_code, stdout_lines) for `git worktree list --porcelain` run in a directory
WorktreeListRunner = Callable[[str], Tuple[int, Sequence[str]]]


def run_worktree_list(working_directory: str) -> Tuple[int, List[str]]:
    """Run `git worktree list --porcelain` in the given directory.

    Args:
        working_directory: Repository root to run the command in

    Returns:
        Tuple of (exit_code, stdout_lines). Raises if git cannot be launched.
    """
    status, stdout, stderr = git.Git(working_directory).execute(
        ["git", "worktree", "list", "--porcelain"],
        with_extended_output=True,
        with_exceptions=False,
    )
    if status != 0 and stderr:
        logger.debug(f"git worktree list stderr: {stderr.strip()}")
    return status, stdout.splitlines()


class WorktreeService:
    """Service for discovering git worktrees."""

    def __init__(
        self,
        repo_path: str,
        runner: Optional[WorktreeListRunner] = None,
        parser: Optional[PorcelainParser] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the worktree service.

        Args:
            repo_path: Path inside the git repository (any worktree, any subdirectory)
            runner: Callable producing the porcelain listing, defaults to running git
            parser: Porcelain parser to use
            logger: Logger for discovery failures
        """
        self.repo_path = repo_path
        self.runner = runner or run_worktree_list
        self.parser = parser or PorcelainParser()
        self.logger = logger if logger is not None else get_logger(__name__)

    def resolve_root(self) -> Optional[str]:
        """Get the root of the worktree containing repo_path.

        Symlinks are resolved so the root compares equal to the paths
        git prints in its worktree listing.

        Returns:
            Real path of the worktree root, or None if repo_path is not inside a git worktree
        """
        try:
            repo = git.Repo(self.repo_path, search_parent_directories=True)
            try:
                root = repo.working_tree_dir
            finally:
                repo.close()
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            self.logger.info(f"Not a git repository: {self.repo_path} ({e})")
            return None

        if root is None:
            self.logger.info(f"Repository at {self.repo_path} has no working tree")
            return None
        return os.path.realpath(root)

    def list_worktrees(self) -> List[WorktreeRecord]:
        """Get information about all worktrees of the repository.

        Never raises: any failure to run or read the listing yields an empty list.

        Returns:
            List of WorktreeRecord objects in git's order
        """
        try:
            root = self.resolve_root()
        except Exception as e:
            self.logger.info(f"Could not resolve repository root for {self.repo_path}: {e}")
            return []
        if root is None:
            return []

        try:
            exit_code, lines = self.runner(root)
        except Exception as e:
            self.logger.info(f"Could not list worktrees: {e}")
            return []

        if exit_code != 0:
            self.logger.info(f"git worktree list exited with status {exit_code}")
            return []

        worktrees = self.parser.parse(lines, root)
        self.logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            self.logger.debug(f"  {wt}")
        return worktrees

    def find_worktree(self, name_or_path: str) -> Optional[WorktreeRecord]:
        """Find a worktree by path or display name.

        Args:
            name_or_path: Worktree path (absolute or relative) or final path segment

        Returns:
            The matching record, or None
        """
        worktrees = self.list_worktrees()
        candidate = os.path.realpath(name_or_path)
        for wt in worktrees:
            if wt.path == name_or_path or os.path.normpath(wt.path) == candidate:
                return wt
        for wt in worktrees:
            if wt.display_name == name_or_path:
                return wt
        return None

    def get_current_worktree(self) -> Optional[WorktreeRecord]:
        return next((wt for wt in self.list_worktrees() if wt.is_current), None)

    def get_main_worktree(self) -> Optional[WorktreeRecord]:
        return next((wt for wt in self.list_worktrees() if wt.is_main), None)
