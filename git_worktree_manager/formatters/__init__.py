"""Formatting utilities for git-worktree-manager.

This package provides formatting functions for displaying worktrees and
sync results, organized into logical modules:
- worktree: Worktree name and flag formatting
- sync: Link decision and report formatting
"""

# Worktree formatters
from .worktree import format_flags, format_worktree_name

# Sync formatters
from .sync import (
    decision_key,
    format_decision,
    format_decision_style,
    format_detail,
    format_summary,
)

__all__ = [
    # Worktree
    "format_flags",
    "format_worktree_name",
    # Sync
    "decision_key",
    "format_decision",
    "format_decision_style",
    "format_detail",
    "format_summary",
]
