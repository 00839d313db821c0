"""Config sync models and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


class PolicyKind(Enum):
    """How a config entry is treated across worktrees."""
    MIRRORED_DIRECTORY = "mirrored-directory"
    MIRRORED_FILE = "mirrored-file"
    EXCLUDED_FILE = "excluded-file"


class LinkDecision(Enum):
    """Outcome of evaluating one target entry against the source."""
    CREATE = "create"
    REPAIR = "repair"
    SKIP_EXISTS = "skip-exists"
    SKIP_UNSUPPORTED = "skip-unsupported"


@dataclass(frozen=True)
class PolicyEntry:
    """A single name governed by the sync policy."""
    kind: PolicyKind
    name: str


@dataclass
class LinkResult:
    """Result of reconciling one config entry."""
    name: str
    source: Path
    target: Path
    decision: Optional[LinkDecision] = None  # None = failed before a decision was made
    error: Optional[str] = None

    @property
    def converged(self) -> bool:
        return self.error is None


@dataclass
class SyncReport:
    """Per-entry results of one reconcile call."""
    source_config_dir: Path
    target_config_dir: Path
    results: List[LinkResult] = field(default_factory=list)
    source_missing: bool = False
    dry_run: bool = False

    def decisions(self) -> Dict[str, Optional[LinkDecision]]:
        """Map entry name to the decision taken for it."""
        return {result.name: result.decision for result in self.results}

    def failures(self) -> List[LinkResult]:
        return [result for result in self.results if not result.converged]

    def summary(self) -> Dict[str, int]:
        """Count results per decision, with failures counted separately."""
        counts = {decision.value: 0 for decision in LinkDecision}
        counts["failed"] = 0
        for result in self.results:
            if not result.converged:
                counts["failed"] += 1
            elif result.decision is not None:
                counts[result.decision.value] += 1
        return counts
