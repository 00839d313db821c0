"""
git-worktree-manager - List git worktrees and share IDE configuration between them
"""

from .__version__ import __version__
from .core import WorktreeManager
from .cli.main import main

__all__ = ["WorktreeManager", "main", "__version__"]
