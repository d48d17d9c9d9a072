"""Git subprocess wrapper for repository discovery, status, branches, mutations."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from gitnav.errors import NavigatorError, NotInGitRepoError

log = logging.getLogger(__name__)


class GitError(NavigatorError):
    """Raised when git is unavailable or a git command fails."""

    exit_code = 2

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


def _run_git(args: Sequence[str], cwd: Path, timeout: Optional[int] = None) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    log.debug("git %s (cwd=%s)", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(
            f"git {args[0]} failed: {stderr or f'exit status {result.returncode}'}",
            returncode=result.returncode,
            stderr=stderr,
        )
    return result.stdout


# ── discovery and read-only queries ──────────────────────────────────────────


def find_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the work tree containing *cwd*."""
    cwd = cwd or Path.cwd()
    if not cwd.is_dir():
        raise NotInGitRepoError(cwd)
    try:
        out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    except GitError as exc:
        if exc.returncode is None:
            raise
        raise NotInGitRepoError(cwd) from exc
    return Path(out.strip()).resolve()


def get_status(repo_root: Path) -> str:
    """Return raw ``git status --porcelain=v1 -z`` output."""
    return _run_git(
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        cwd=repo_root,
    )


def list_local_branches(repo_root: Path) -> List[str]:
    output = _run_git(
        ["for-each-ref", "--format=%(refname:short)", "refs/heads/"],
        cwd=repo_root,
    )
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_current_branch(repo_root: Path) -> Optional[str]:
    """Return the checked-out branch name, or None when HEAD is detached."""
    try:
        out = _run_git(["symbolic-ref", "--short", "-q", "HEAD"], cwd=repo_root)
    except GitError as exc:
        if exc.returncode is None:
            raise
        return None
    return out.strip() or None


def has_commits(repo_root: Path) -> bool:
    try:
        _run_git(["rev-parse", "--verify", "-q", "HEAD"], cwd=repo_root)
    except GitError as exc:
        if exc.returncode is None:
            raise
        return False
    return True


def describe_head(repo_root: Path) -> str:
    """Branch name, ``detached at <hash>``, or ``-none-``."""
    branch = get_current_branch(repo_root)
    if branch:
        return branch
    if not has_commits(repo_root):
        return "-none-"
    short = _run_git(["rev-parse", "--short=7", "HEAD"], cwd=repo_root).strip()
    return f"detached at {short}"


def get_parent_commit(repo_root: Path) -> Optional[Tuple[str, str]]:
    """Return ``(short_hash, subject)`` of HEAD, or None before the first commit."""
    if not has_commits(repo_root):
        return None
    out = _run_git(["log", "-1", "--format=%h%x00%s"], cwd=repo_root).strip()
    short_hash, _, subject = out.partition("\0")
    return short_hash, subject


def get_ahead_behind(repo_root: Path) -> Optional[Tuple[int, int]]:
    """Return ``(ahead, behind)`` against the upstream, or None without one."""
    try:
        out = _run_git(
            ["rev-list", "--left-right", "--count", "HEAD...@{upstream}"],
            cwd=repo_root,
        )
    except GitError as exc:
        if exc.returncode is None:
            raise
        return None
    parts = out.split()
    if len(parts) != 2:
        return None
    return int(parts[0]), int(parts[1])


def diff_file(repo_root: Path, path: str, *, staged: bool, against_head: bool) -> str:
    """Return the diff of a single path without color codes."""
    args = ["diff", "--no-color"]
    if staged:
        args.append("--cached")
    if against_head and has_commits(repo_root):
        args.append("HEAD")
    args += ["--", path]
    return _run_git(args, cwd=repo_root)


# ── mutations (one git invocation per action) ────────────────────────────────


def add_paths(repo_root: Path, paths: Sequence[str]) -> None:
    if paths:
        _run_git(["add", "--", *paths], cwd=repo_root)


def reset_paths(repo_root: Path, paths: Sequence[str]) -> None:
    if paths:
        _run_git(["reset", "-q", "--", *paths], cwd=repo_root)


def checkout_paths(repo_root: Path, paths: Sequence[str]) -> None:
    if paths:
        _run_git(["checkout", "--", *paths], cwd=repo_root)


def checkout_branch(repo_root: Path, name: str) -> None:
    _run_git(["checkout", name], cwd=repo_root)


def create_branch(repo_root: Path, name: str) -> None:
    _run_git(["checkout", "-b", name], cwd=repo_root)
