"""Pytest fixtures for git-worktree-manager tests"""
import os
import tempfile
from pathlib import Path
import pytest
import git


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolve so paths match what git reports on platforms with symlinked /tmp
        yield Path(os.path.realpath(tmpdir))


@pytest.fixture
def source_root(temp_dir):
    """A worktree root with a populated .idea directory."""
    root = temp_dir / "source"
    idea = root / ".idea"
    (idea / "runConfigurations").mkdir(parents=True)
    (idea / "runConfigurations" / "App.xml").write_text("<component name=\"ProjectRunConfigurationManager\" />\n")
    (idea / "codeStyles").mkdir()
    (idea / "codeStyles" / "Project.xml").write_text("<code_scheme />\n")
    (idea / "scopes").mkdir()
    (idea / "misc.xml").write_text("<project version=\"4\" />\n")
    (idea / "vcs.xml").write_text("<project version=\"4\" />\n")
    (idea / "app.iml").write_text("<module type=\"PYTHON_MODULE\" />\n")
    (idea / "workspace.xml").write_text("<project>source window state</project>\n")
    (idea / "tasks.xml").write_text("<project>source tasks</project>\n")
    return root


@pytest.fixture
def target_root(temp_dir):
    """An empty worktree root."""
    root = temp_dir / "target"
    root.mkdir()
    return root


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_worktree(git_repo, temp_dir):
    """A repository with one linked worktree on branch 'feature/login'."""
    worktree_path = temp_dir / "feature-wt"
    git_repo.git.worktree("add", "-b", "feature/login", str(worktree_path))

    yield git_repo, worktree_path


@pytest.fixture
def shared_idea(git_repo_with_worktree):
    """Populate the main worktree's .idea directory."""
    repo, worktree_path = git_repo_with_worktree
    idea = Path(repo.working_dir) / ".idea"
    (idea / "runConfigurations").mkdir(parents=True)
    (idea / "runConfigurations" / "Tests.xml").write_text("<component />\n")
    (idea / "misc.xml").write_text("<project version=\"4\" />\n")
    (idea / "workspace.xml").write_text("<project />\n")
    return Path(repo.working_dir), worktree_path


def snapshot(root: Path) -> dict:
    """Map relative path to ('link', target) / ('dir', None) / ('file', content)."""
    state = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = Path(dirpath) / name
            rel = str(path.relative_to(root))
            if path.is_symlink():
                state[rel] = ("link", os.readlink(path))
            elif path.is_dir():
                state[rel] = ("dir", None)
            else:
                state[rel] = ("file", path.read_bytes())
    return state


@pytest.fixture
def snapshot_tree():
    """Function capturing a directory tree's structure and contents."""
    return snapshot
