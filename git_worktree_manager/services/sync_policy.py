"""Which `.idea` entries are shared between worktrees.

Directories and files holding shared project intent (formatting rules, run
configurations, dependency wiring) are mirrored with symlinks so an edit in
one worktree shows up in all of them. Files holding per-window session state
(open editors, breakpoints, task context) are excluded so two windows on the
same project do not fight over them.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Optional

from git_worktree_manager.exceptions import PolicyConflictError
from git_worktree_manager.models.sync import PolicyEntry, PolicyKind

MIRRORED_DIRECTORIES = frozenset({
    "runConfigurations",   # run/debug configurations
    "inspectionProfiles",  # inspection settings
    "codeStyles",          # code formatting
    "dictionaries",        # spell check
    "scopes",              # custom scopes
    "libraries",           # shared libraries
    "artifacts",           # build artifact definitions
    "dataSources",         # database connections
    "sqldialects",         # SQL dialect mappings
})

MIRRORED_FILES = frozenset({
    "misc.xml",                  # SDK / interpreter
    "modules.xml",               # module list
    "vcs.xml",                   # VCS roots
    "encodings.xml",             # file encodings
    "compiler.xml",              # compiler settings
    "jarRepositories.xml",       # dependency repositories
    "kotlinc.xml",               # language toolchain
    "externalDependencies.xml",  # required plugins
})

EXCLUDED_FILES = frozenset({
    "workspace.xml",         # window and editor state
    "tasks.xml",             # task tracking
    "usage.statistics.xml",  # usage statistics
    "sonarlint.xml",         # linter session
})

MODULE_EXTENSION = ".iml"


@dataclass(frozen=True)
class SyncPolicy:
    """Immutable membership table for config sync."""

    mirrored_directories: FrozenSet[str] = MIRRORED_DIRECTORIES
    mirrored_files: FrozenSet[str] = MIRRORED_FILES
    excluded_files: FrozenSet[str] = EXCLUDED_FILES
    module_extension: str = MODULE_EXTENSION

    def __post_init__(self):
        """Freeze the name sets and check they do not overlap."""
        for attr in ("mirrored_directories", "mirrored_files", "excluded_files"):
            object.__setattr__(self, attr, frozenset(getattr(self, attr)))

        overlap = (
            (self.mirrored_directories & self.mirrored_files)
            | (self.mirrored_directories & self.excluded_files)
            | (self.mirrored_files & self.excluded_files)
        )
        if overlap:
            raise PolicyConflictError(overlap)

    def is_mirrored_directory(self, name: str) -> bool:
        return name in self.mirrored_directories

    def is_mirrored_file(self, name: str) -> bool:
        return name in self.mirrored_files

    def is_excluded_file(self, name: str) -> bool:
        return name in self.excluded_files

    def is_module_file(self, name: str) -> bool:
        """Module descriptors are mirrored whatever their exact name."""
        return (
            name.endswith(self.module_extension)
            and name != self.module_extension
            and not self.is_excluded_file(name)
        )

    def entries(self) -> Iterator[PolicyEntry]:
        """All named policy entries, grouped by kind and sorted by name."""
        for kind, names in (
            (PolicyKind.MIRRORED_DIRECTORY, self.mirrored_directories),
            (PolicyKind.MIRRORED_FILE, self.mirrored_files),
            (PolicyKind.EXCLUDED_FILE, self.excluded_files),
        ):
            for name in sorted(names):
                yield PolicyEntry(kind, name)

    def extend(
        self,
        mirrored_directories: Iterable[str] = (),
        mirrored_files: Iterable[str] = (),
        excluded_files: Iterable[str] = (),
        module_extension: Optional[str] = None,
    ) -> "SyncPolicy":
        """Return a new policy with extra names added."""
        return SyncPolicy(
            mirrored_directories=self.mirrored_directories | frozenset(mirrored_directories),
            mirrored_files=self.mirrored_files | frozenset(mirrored_files),
            excluded_files=self.excluded_files | frozenset(excluded_files),
            module_extension=module_extension or self.module_extension,
        )


DEFAULT_POLICY = SyncPolicy()
