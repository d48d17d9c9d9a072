"""Shared test fixtures: isolated cache/config dirs, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


def git(repo: Path, *args: str) -> str:
    """Run git in *repo* and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
    )
    return result.stdout


def current_branch(repo: Path) -> str:
    return git(repo, "symbolic-ref", "--short", "HEAD").strip()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path_factory, monkeypatch) -> Path:
    """Point cache and config lookups at a throwaway directory outside any repo."""
    base = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CACHE_HOME", str(base / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    for name in ("GITNAV_FORMAT", "GITNAV_CACHE_DIR", "GITNAV_STALE_CHECK"):
        monkeypatch.delenv(name, raising=False)
    return base


def _init_repo(path: Path) -> Path:
    subprocess.run(["git", "init", str(path)], capture_output=True, check=True)
    git(path, "config", "user.email", "test@test.com")
    git(path, "config", "user.name", "Test")
    git(path, "config", "commit.gpgsign", "false")
    return path


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """A repository with no commits yet."""
    return _init_repo(tmp_path)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit."""
    _init_repo(tmp_path)
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "tracked.txt").write_text("one\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def dirty_git_repo(tmp_git_repo: Path) -> Path:
    """Repo with one staged, one unstaged and one untracked change.

    Listing order: [1] staged.txt (new, staged), [2] tracked.txt (modified),
    [3] untracked.txt.
    """
    (tmp_git_repo / "staged.txt").write_text("staged\n")
    git(tmp_git_repo, "add", "staged.txt")
    (tmp_git_repo / "tracked.txt").write_text("one\nchanged\n")
    (tmp_git_repo / "untracked.txt").write_text("loose\n")
    return tmp_git_repo
