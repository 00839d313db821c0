"""Worktree name and flag formatting utilities."""

from git_worktree_manager.models.worktree import WorktreeRecord
from git_worktree_manager.constants import SYMBOL_CURRENT, SYMBOL_DETACHED, SYMBOL_MAIN


def format_flags(worktree: WorktreeRecord) -> str:
    """
    Format worktree state indicators.

    Args:
        worktree: Worktree record

    Returns:
        Space-separated symbols, empty if none apply
    """
    flags = []
    if worktree.is_current:
        flags.append(SYMBOL_CURRENT)
    if worktree.is_main:
        flags.append(SYMBOL_MAIN)
    if worktree.is_detached:
        flags.append(SYMBOL_DETACHED)
    return " ".join(flags)


def format_worktree_name(worktree: WorktreeRecord) -> str:
    """
    Format worktree display name with a current marker.

    Args:
        worktree: Worktree record

    Returns:
        Display name, suffixed with "(current)" for the current worktree
    """
    suffix = "  (current)" if worktree.is_current else ""
    return f"{worktree.display_name}{suffix}"
