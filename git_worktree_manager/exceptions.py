"""Custom exceptions for git-worktree-manager"""

from typing import Optional


class WorktreeManagerError(Exception):
    """Base exception for all git-worktree-manager errors."""
    pass


class GitOperationError(WorktreeManagerError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ConfigSyncError(WorktreeManagerError):
    """Exception raised when configuration sync cannot proceed."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Config sync operation '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ConfigDirectoryError(ConfigSyncError):
    """Exception raised when the target config directory cannot be created."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__("create_config_dir", path, message)


class PolicyConflictError(WorktreeManagerError):
    """Exception raised when a sync policy lists the same name in two categories."""

    def __init__(self, names):
        self.names = sorted(names)
        super().__init__(f"Sync policy categories overlap: {', '.join(self.names)}")


class WorktreeNotFoundError(WorktreeManagerError):
    """Exception raised when a worktree cannot be found by name or path."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Worktree '{name}' not found")


class OpenWorktreeError(WorktreeManagerError):
    """Exception raised when a worktree cannot be opened as a workspace."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Could not open worktree '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
