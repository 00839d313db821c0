"""Shared constants for git-worktree-manager."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Unified column definitions for both CLI and TUI
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Worktree", 24),
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("flags", "Flags", 14),
    ColumnDefinition("path", "Path"),
]

SYNC_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("entry", "Entry", 28),
    ColumnDefinition("decision", "Decision", 16),
    ColumnDefinition("detail", "Detail"),
]


# Symbol constants
SYMBOL_CURRENT = "@"
SYMBOL_MAIN = "M"
SYMBOL_DETACHED = "D"


# Labels shown for each link decision
DECISION_LABELS = {
    "create": "linked",
    "repair": "re-linked",
    "skip-exists": "already linked",
    "skip-unsupported": "kept (local)",
    "failed": "failed",
}

DRY_RUN_DECISION_LABELS = {
    "create": "would link",
    "repair": "would re-link",
    "skip-exists": "already linked",
    "skip-unsupported": "kept (local)",
    "failed": "failed",
}


# CLI colors (Rich color names)
DECISION_COLORS = {
    "create": "green",
    "repair": "yellow",
    "skip-exists": None,
    "skip-unsupported": "cyan",
    "failed": "red",
}


# Legend text for CLI summary
LEGEND_TEXT = """
Legend:
@ = Current worktree      M = Main worktree
D = Detached HEAD
"""
