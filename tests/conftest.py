"""Shared fixtures for gitlog tests."""

import shutil
import subprocess

import pytest

from gitlog.config import GitConfig
from gitlog.errors import GitError
from gitlog.runner import GitRunner


class FakeRunner(GitRunner):
    """GitRunner that answers from a table instead of spawning git.

    ``responses`` maps an argument tuple (without ``git --no-pager``) to the
    bytes git would print. A value of ``None`` simulates a non-zero exit.
    A callable value is called with the argument tuple.
    """

    def __init__(self, responses=None, default=b"", config=None):
        super().__init__(config or GitConfig())
        self.responses = dict(responses or {})
        self.default = default
        self.calls = []

    def run(self, args):
        args = tuple(args)
        self.calls.append(args)
        response = self.responses.get(args, self.default)
        if callable(response):
            response = response(args)
        if response is None:
            raise GitError(self.command(args), returncode=128, stderr=b"fatal: bad revision")
        return response


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create a temporary git repository with proper git config.
    Returns the repo path.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    subprocess.run(["git", "init"], cwd=repo_path, check=True, capture_output=True)
    for key, value in [
        ("user.name", "Test User"),
        ("user.email", "test@example.com"),
        ("commit.gpgsign", "false"),
    ]:
        subprocess.run(
            ["git", "config", key, value],
            cwd=repo_path,
            check=True,
            capture_output=True,
        )

    return repo_path


def _commit_all(repo_path, message="commit"):
    subprocess.run(["git", "add", "."], cwd=repo_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", message],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def commit_all():
    """Return a helper that adds all changes and commits."""
    return _commit_all


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without gitlog environment settings."""
    for name in ("DEBUG", "GIT_CHECK_EXCLUDE", "GIT_BINARY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
