"""Utility functions for git-worktree-manager.

This package provides utility modules:
- logging: Logging configuration and logger creation
- threading: Worker pool sizing for parallel sync
- filesystem: Filesystem access used by config sync
"""

from .logging import setup_logging, get_logger, ColoredFormatter
from .threading import (
    is_free_threading_enabled,
    get_optimal_worker_count,
    get_threading_info,
)
from .filesystem import LocalFileSystem

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "ColoredFormatter",
    # Threading
    "is_free_threading_enabled",
    "get_optimal_worker_count",
    "get_threading_info",
    # Filesystem
    "LocalFileSystem",
]
