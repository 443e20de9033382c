"""Pytest configuration and fixtures for infer-version tests."""

import subprocess
from pathlib import Path

import pytest

DEMO_MANIFEST = """\
[package]
name = "demo"
version = "1.2.3"
authors = ["Demo Author <demo@example.com>"]

[dependencies]
serde = "1.0"
"""


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test User",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def run_git():
    """Return a helper that runs git in a repository with a throwaway identity."""
    return _git


@pytest.fixture
def write_manifest(tmp_path):
    """Return a helper that writes a manifest into tmp_path."""

    def _write(content: str = DEMO_MANIFEST, name: str = "Cargo.toml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def empty_git_repo(tmp_path):
    """Create a git repository without any commits."""
    _git(tmp_path, "init", "--quiet")
    return tmp_path


@pytest.fixture
def git_repo(empty_git_repo):
    """Create a git repository with one commit.

    Returns:
        Tuple of (repository path, HEAD commit id)
    """
    _git(empty_git_repo, "commit", "--allow-empty", "--quiet", "-m", "Initial commit")
    head = _git(empty_git_repo, "rev-parse", "HEAD")
    return empty_git_repo, head
