"""Worktree data models."""

from dataclasses import dataclass

DETACHED_BRANCH = "(detached HEAD)"
UNKNOWN_BRANCH = "(unknown)"


@dataclass(frozen=True)
class WorktreeRecord:
    """Information about a git worktree."""

    path: str
    branch: str
    is_main: bool  # Is this the main working tree?
    is_current: bool  # Is this the worktree we are running from?

    @property
    def display_name(self) -> str:
        """Final path segment, used as the worktree's name."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def is_detached(self) -> bool:
        return self.branch == DETACHED_BRANCH

    def __str__(self) -> str:
        """String representation of worktree."""
        main_marker = " (main)" if self.is_main else ""
        current_marker = " (current)" if self.is_current else ""
        return f"{self.branch} @ {self.path}{main_marker}{current_marker}"
