"""Parser for `git worktree list --porcelain` output."""

from typing import Iterable, List, Optional

from git_worktree_manager.models.worktree import (
    DETACHED_BRANCH,
    UNKNOWN_BRANCH,
    WorktreeRecord,
)

BRANCH_REF_PREFIX = "refs/heads/"


class PorcelainParser:
    """Turns porcelain worktree listings into WorktreeRecord lists.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    The parser keeps no state between calls, so one instance can be shared.
    """

    def parse(self, lines: Iterable[str], current_path: str) -> List[WorktreeRecord]:
        """Parse porcelain lines into worktree records.

        Args:
            lines: Raw output lines, with or without line terminators
            current_path: Root of the worktree the caller runs from

        Returns:
            Records in the order their `worktree` lines appear
        """
        worktrees: List[WorktreeRecord] = []
        path: Optional[str] = None
        branch: Optional[str] = None
        is_bare = False

        def flush() -> None:
            nonlocal path, branch, is_bare
            if path is not None:
                worktrees.append(
                    WorktreeRecord(
                        path=path,
                        branch=branch if branch is not None else UNKNOWN_BRANCH,
                        # First worktree stands in as main when git never says "bare"
                        is_main=is_bare or not worktrees,
                        is_current=path == current_path,
                    )
                )
            path = None
            branch = None
            is_bare = False

        for raw_line in lines:
            line = raw_line.rstrip("\r\n")

            if not line:
                flush()
                continue

            key, sep, value = line.partition(" ")
            if key == "worktree" and sep:
                flush()
                path = value
            elif key == "branch" and sep:
                if value.startswith(BRANCH_REF_PREFIX):
                    branch = value[len(BRANCH_REF_PREFIX):]
                else:
                    branch = value
            elif line == "bare":
                is_bare = True
            elif line == "detached":
                branch = DETACHED_BRANCH
            # HEAD, locked, prunable and future keys are ignored

        # Handle last entry if no trailing blank line
        flush()

        return worktrees


def parse_porcelain(lines: Iterable[str], current_path: str) -> List[WorktreeRecord]:
    """Parse porcelain output with a default parser."""
    return PorcelainParser().parse(lines, current_path)
