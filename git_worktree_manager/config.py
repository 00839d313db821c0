"""Configuration handling for git-worktree-manager"""

import os
import shlex
from dataclasses import dataclass, field
from typing import Optional, List

from git_worktree_manager.services.sync_policy import DEFAULT_POLICY, MODULE_EXTENSION, SyncPolicy

OPEN_COMMAND_ENV = "GIT_WORKTREE_MANAGER_OPEN_COMMAND"


@dataclass
class Config:
    """Configuration for git-worktree-manager with validation."""

    # Config sync
    config_dir_name: str = ".idea"
    extra_mirrored_directories: List[str] = field(default_factory=list)
    extra_mirrored_files: List[str] = field(default_factory=list)
    extra_excluded_files: List[str] = field(default_factory=list)
    module_extension: str = MODULE_EXTENSION

    # Opening worktrees
    open_command: List[str] = field(default_factory=lambda: ["idea"])

    # Execution modes
    dry_run: bool = False
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Sync worktrees one at a time in sync_all
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config_dir_name()
        self._validate_module_extension()
        self._validate_open_command()
        self._validate_workers()
        self._validate_extra_names()

    def _validate_config_dir_name(self):
        """Validate config_dir_name is a single path component."""
        name = (self.config_dir_name or "").strip()
        if not name or name in (".", "..") or "/" in name or os.sep in name:
            raise ValueError(f"config_dir_name must be a plain directory name, got '{self.config_dir_name}'")
        self.config_dir_name = name

    def _validate_module_extension(self):
        """Validate module_extension looks like a file extension."""
        if not self.module_extension.startswith(".") or len(self.module_extension) < 2:
            raise ValueError(f"module_extension must start with '.', got '{self.module_extension}'")

    def _validate_open_command(self):
        """Validate open_command is a non-empty argument list."""
        if isinstance(self.open_command, str):
            self.open_command = shlex.split(self.open_command)
        if not self.open_command:
            raise ValueError("open_command cannot be empty")

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def _validate_extra_names(self):
        """Validate extra policy names are lists of plain names."""
        for attr in ("extra_mirrored_directories", "extra_mirrored_files", "extra_excluded_files"):
            names = getattr(self, attr)
            if not isinstance(names, list):
                raise ValueError(f"{attr} must be a list")
            for name in names:
                if not name or "/" in name:
                    raise ValueError(f"{attr} entries must be plain names, got '{name}'")

    def build_policy(self) -> SyncPolicy:
        """Effective sync policy: the defaults plus any configured extras."""
        return DEFAULT_POLICY.extend(
            mirrored_directories=self.extra_mirrored_directories,
            mirrored_files=self.extra_mirrored_files,
            excluded_files=self.extra_excluded_files,
            module_extension=self.module_extension,
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "config_dir_name": self.config_dir_name,
            "extra_mirrored_directories": self.extra_mirrored_directories,
            "extra_mirrored_files": self.extra_mirrored_files,
            "extra_excluded_files": self.extra_excluded_files,
            "module_extension": self.module_extension,
            "open_command": self.open_command,
            "dry_run": self.dry_run,
            "verbose": self.verbose,
            "debug": self.debug,
            "sequential": self.sequential,
            "workers": self.workers,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Create Config with environment defaults, then explicit overrides."""
        values = {}
        open_command = os.environ.get(OPEN_COMMAND_ENV)
        if open_command:
            values["open_command"] = shlex.split(open_command)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(values)
