"""Tests for SyncPolicy"""
import dataclasses

import pytest

from git_worktree_manager.exceptions import PolicyConflictError
from git_worktree_manager.models.sync import PolicyEntry, PolicyKind
from git_worktree_manager.services.sync_policy import DEFAULT_POLICY, SyncPolicy


class TestDefaultPolicy:
    """Test the built-in policy table."""

    @pytest.mark.parametrize("name", [
        "runConfigurations", "inspectionProfiles", "codeStyles", "dictionaries", "scopes",
        "libraries", "artifacts", "dataSources", "sqldialects",
    ])
    def test_mirrored_directories(self, name):
        assert DEFAULT_POLICY.is_mirrored_directory(name)
        assert not DEFAULT_POLICY.is_mirrored_file(name)

    @pytest.mark.parametrize("name", [
        "misc.xml", "modules.xml", "vcs.xml", "encodings.xml", "compiler.xml",
        "jarRepositories.xml", "kotlinc.xml", "externalDependencies.xml",
    ])
    def test_mirrored_files(self, name):
        assert DEFAULT_POLICY.is_mirrored_file(name)
        assert not DEFAULT_POLICY.is_excluded_file(name)

    @pytest.mark.parametrize("name", [
        "workspace.xml", "tasks.xml", "usage.statistics.xml", "sonarlint.xml",
    ])
    def test_excluded_files(self, name):
        assert DEFAULT_POLICY.is_excluded_file(name)
        assert not DEFAULT_POLICY.is_mirrored_file(name)
        assert not DEFAULT_POLICY.is_module_file(name)

    def test_categories_are_disjoint(self):
        dirs = DEFAULT_POLICY.mirrored_directories
        files = DEFAULT_POLICY.mirrored_files
        excluded = DEFAULT_POLICY.excluded_files
        assert not (dirs & files)
        assert not (dirs & excluded)
        assert not (files & excluded)

    def test_module_files(self):
        """Test any .iml name is a module file."""
        assert DEFAULT_POLICY.is_module_file("backend.iml")
        assert DEFAULT_POLICY.is_module_file("my-project.main.iml")
        assert not DEFAULT_POLICY.is_module_file(".iml")
        assert not DEFAULT_POLICY.is_module_file("backend.iml.bak")
        assert not DEFAULT_POLICY.is_module_file("misc.xml")

    def test_unlisted_names(self):
        for predicate in (
            DEFAULT_POLICY.is_mirrored_directory,
            DEFAULT_POLICY.is_mirrored_file,
            DEFAULT_POLICY.is_excluded_file,
        ):
            assert not predicate("shelf")

    def test_policy_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_POLICY.mirrored_files = frozenset()

    def test_entries(self):
        entries = list(DEFAULT_POLICY.entries())
        assert PolicyEntry(PolicyKind.MIRRORED_DIRECTORY, "scopes") in entries
        assert PolicyEntry(PolicyKind.EXCLUDED_FILE, "workspace.xml") in entries
        assert len(entries) == (
            len(DEFAULT_POLICY.mirrored_directories)
            + len(DEFAULT_POLICY.mirrored_files)
            + len(DEFAULT_POLICY.excluded_files)
        )


class TestCustomPolicy:
    """Test building and extending policies."""

    def test_overlap_is_rejected(self):
        with pytest.raises(PolicyConflictError) as exc_info:
            SyncPolicy(mirrored_files={"misc.xml"}, excluded_files={"misc.xml"})
        assert exc_info.value.names == ["misc.xml"]

    def test_sets_are_frozen(self):
        policy = SyncPolicy(mirrored_directories={"a"}, mirrored_files=["b"], excluded_files=())
        assert isinstance(policy.mirrored_directories, frozenset)
        assert isinstance(policy.mirrored_files, frozenset)
        assert policy.is_mirrored_file("b")

    def test_extend_returns_new_policy(self):
        extended = DEFAULT_POLICY.extend(mirrored_files=["gradle.xml"], excluded_files=["shelf.xml"])

        assert extended.is_mirrored_file("gradle.xml")
        assert extended.is_excluded_file("shelf.xml")
        assert not DEFAULT_POLICY.is_mirrored_file("gradle.xml")

    def test_extend_rejects_conflicts(self):
        with pytest.raises(PolicyConflictError):
            DEFAULT_POLICY.extend(mirrored_files=["workspace.xml"])

    def test_excluded_name_wins_over_module_extension(self):
        policy = SyncPolicy(excluded_files={"local.iml"})
        assert not policy.is_module_file("local.iml")
        assert policy.is_module_file("shared.iml")

    def test_custom_module_extension(self):
        policy = DEFAULT_POLICY.extend(module_extension=".ipr")
        assert policy.is_module_file("project.ipr")
        assert not policy.is_module_file("project.iml")
