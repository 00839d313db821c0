"""Shares `.idea` configuration from one worktree into another.

Mirrored entries become symlinks in the target pointing back at the source.
Anything in the target that is a real file or directory is left alone, and
the source tree is only ever read.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from git_worktree_manager.exceptions import ConfigDirectoryError
from git_worktree_manager.models.sync import LinkDecision, LinkResult, SyncReport
from git_worktree_manager.services.sync_policy import DEFAULT_POLICY, SyncPolicy
from git_worktree_manager.utils.filesystem import LocalFileSystem
from git_worktree_manager.utils.logging import get_logger

CONFIG_DIR_NAME = ".idea"

PathLike = Union[str, os.PathLike]


class ConfigReconciler:
    """Converges a target worktree's config directory toward a sync policy."""

    def __init__(
        self,
        policy: SyncPolicy = DEFAULT_POLICY,
        filesystem: Optional[LocalFileSystem] = None,
        logger: Optional[logging.Logger] = None,
        config_dir_name: str = CONFIG_DIR_NAME,
    ):
        self.policy = policy
        self.fs = filesystem or LocalFileSystem()
        self.logger = logger if logger is not None else get_logger(__name__)
        self.config_dir_name = config_dir_name

    def reconcile(self, source_root: PathLike, target_root: PathLike, dry_run: bool = False) -> SyncReport:
        """Link the policy's entries from source_root's config dir into target_root's.

        Safe to call repeatedly: a second call only reports SKIP_EXISTS for
        entries the first call linked.

        Args:
            source_root: Worktree root to share config from (never modified)
            target_root: Worktree root to share config into
            dry_run: Report decisions without touching the filesystem

        Returns:
            SyncReport with one LinkResult per policy entry found at the source

        Raises:
            ConfigDirectoryError: If the target config directory cannot be created
        """
        source_dir = Path(os.path.abspath(source_root)) / self.config_dir_name
        target_dir = Path(os.path.abspath(target_root)) / self.config_dir_name
        report = SyncReport(source_config_dir=source_dir, target_config_dir=target_dir, dry_run=dry_run)

        if not self.fs.exists(source_dir):
            self.logger.info(f"No {self.config_dir_name} folder in source: {source_dir}")
            report.source_missing = True
            return report

        if os.path.realpath(source_dir) == os.path.realpath(target_dir):
            self.logger.info(f"Source and target share the same config folder: {source_dir}")
            return report

        if not dry_run:
            try:
                self.fs.make_dirs(target_dir)
            except OSError as e:
                self.logger.error(f"Could not create {target_dir}: {e}")
                raise ConfigDirectoryError(str(target_dir), str(e)) from e

        for name, source, target in self._iter_entries(source_dir, target_dir):
            result = self._reconcile_entry(name, source, target, dry_run)
            if result is not None:
                report.results.append(result)

        counts = ", ".join(f"{count} {key}" for key, count in report.summary().items() if count)
        self.logger.info(f"Synced {source_dir} -> {target_dir}: {counts or 'nothing to share'}")
        return report

    def _iter_entries(self, source_dir: Path, target_dir: Path) -> Iterator[Tuple[str, Path, Path]]:
        """Yield (name, source, target) for every policy entry to consider."""
        for name in sorted(self.policy.mirrored_directories):
            yield name, source_dir / name, target_dir / name
        for name in sorted(self.policy.mirrored_files):
            yield name, source_dir / name, target_dir / name

        try:
            names = self.fs.list_dir(source_dir)
        except OSError as e:
            self.logger.warning(f"Failed to list module files in {source_dir}: {e}")
            return
        for name in names:
            # Names listed explicitly were already yielded above
            if name in self.policy.mirrored_files or name in self.policy.mirrored_directories:
                continue
            if self.policy.is_module_file(name):
                yield name, source_dir / name, target_dir / name

    def _reconcile_entry(self, name: str, source: Path, target: Path, dry_run: bool) -> Optional[LinkResult]:
        """Reconcile one entry, catching and recording any failure.

        Returns:
            LinkResult, or None if the entry is absent at the source
        """
        result = LinkResult(name=name, source=source, target=target)
        try:
            if self.policy.is_mirrored_directory(name):
                if not (self.fs.exists(source) and self.fs.is_dir(source)):
                    return None
            elif not self.fs.exists(source):
                return None

            result.decision = self.evaluate_link(source, target)
            if not dry_run:
                self.apply_link(source, target, result.decision)
        except Exception as e:
            self.logger.warning(f"Failed to create symlink for {name}: {e}")
            result.error = str(e)
        return result

    def evaluate_link(self, source: Path, target: Path) -> LinkDecision:
        """Decide what to do with target so that it links to source."""
        if self.fs.is_symlink(target):
            existing = self.fs.read_link(target)
            if existing == str(source):
                return LinkDecision.SKIP_EXISTS
            resolved = os.path.normpath(os.path.join(target.parent, existing))
            if resolved == os.path.normpath(source):
                return LinkDecision.SKIP_EXISTS
            return LinkDecision.REPAIR

        if self.fs.lexists(target):
            return LinkDecision.SKIP_UNSUPPORTED

        return LinkDecision.CREATE

    def apply_link(self, source: Path, target: Path, decision: LinkDecision) -> None:
        """Carry out a decision made by evaluate_link."""
        if decision == LinkDecision.CREATE:
            self.fs.symlink(source, target)
            self.logger.info(f"Created symlink: {target} -> {source}")
        elif decision == LinkDecision.REPAIR:
            self.fs.unlink(target)
            self.fs.symlink(source, target)
            self.logger.info(f"Repaired symlink: {target} -> {source}")
        elif decision == LinkDecision.SKIP_UNSUPPORTED:
            self.logger.info(f"Skipping {target.name} - already exists as regular dir/file")
        else:
            self.logger.debug(f"Symlink already correct: {target}")


def sync_config(source_root: PathLike, target_root: PathLike, dry_run: bool = False) -> SyncReport:
    """Reconcile with the default policy and filesystem."""
    return ConfigReconciler().reconcile(source_root, target_root, dry_run=dry_run)
