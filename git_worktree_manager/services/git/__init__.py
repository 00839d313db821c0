"""Git-related services for git-worktree-manager."""

from .porcelain import PorcelainParser, parse_porcelain
from .worktrees import WorktreeListRunner, WorktreeService, run_worktree_list

__all__ = [
    "PorcelainParser",
    "parse_porcelain",
    "WorktreeListRunner",
    "WorktreeService",
    "run_worktree_list",
]
