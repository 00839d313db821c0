"""Sync result formatting utilities."""

from typing import Optional

from git_worktree_manager.models.sync import LinkResult, SyncReport
from git_worktree_manager.constants import (
    DECISION_COLORS,
    DECISION_LABELS,
    DRY_RUN_DECISION_LABELS,
)


def decision_key(result: LinkResult) -> str:
    """Key into the decision label/color tables for a result."""
    if not result.converged or result.decision is None:
        return "failed"
    return result.decision.value


def format_decision(result: LinkResult, dry_run: bool = False) -> str:
    """
    Format the decision taken for an entry.

    Args:
        result: Per-entry sync result
        dry_run: Whether nothing was applied

    Returns:
        Human readable decision label
    """
    labels = DRY_RUN_DECISION_LABELS if dry_run else DECISION_LABELS
    return labels[decision_key(result)]


def format_decision_style(result: LinkResult) -> Optional[str]:
    return DECISION_COLORS[decision_key(result)]


def format_detail(result: LinkResult) -> str:
    """Error text for failed entries, link target otherwise."""
    if result.error:
        return result.error
    return str(result.source)


def format_summary(report: SyncReport) -> str:
    """
    Format a one-line summary of a sync report.

    Args:
        report: Sync report

    Returns:
        Summary such as "3 linked, 1 kept (local)"
    """
    if report.source_missing:
        return f"nothing to share: {report.source_config_dir} does not exist"

    labels = DRY_RUN_DECISION_LABELS if report.dry_run else DECISION_LABELS
    parts = [f"{count} {labels[key]}" for key, count in report.summary().items() if count]
    return ", ".join(parts) if parts else "nothing to share"
