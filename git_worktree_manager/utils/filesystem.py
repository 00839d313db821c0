"""Filesystem access used by the config reconciler.

The reconciler only talks to the filesystem through this class, so tests can
substitute a subclass that fails on specific paths.
"""

import os
from pathlib import Path
from typing import List


class LocalFileSystem:
    """Thin wrapper over os/pathlib for the operations config sync needs."""

    def exists(self, path: Path) -> bool:
        """True if path exists, following symlinks."""
        return path.exists()

    def lexists(self, path: Path) -> bool:
        """True if path exists, including dangling symlinks."""
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def read_link(self, path: Path) -> str:
        """Raw text of a symlink, without resolving it."""
        return os.readlink(path)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def symlink(self, source: Path, link: Path) -> None:
        """Create a symlink at `link` pointing to `source`."""
        os.symlink(source, link, target_is_directory=source.is_dir())

    def unlink(self, path: Path) -> None:
        """Remove a symlink (never follows it)."""
        if not path.is_symlink():
            raise IsADirectoryError(f"Refusing to remove non-link {path}")
        path.unlink()

    def list_dir(self, path: Path) -> List[str]:
        """Names of entries directly inside path, sorted."""
        return sorted(os.listdir(path))
