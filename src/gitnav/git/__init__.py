"""Git interface layer: adapter, porcelain status parsing, models."""

from gitnav.git.adapter import (
    GitError,
    add_paths,
    checkout_branch,
    checkout_paths,
    create_branch,
    diff_file,
    find_repo_root,
    get_status,
    list_local_branches,
    reset_paths,
)
from gitnav.git.models import BranchEntry, FileEntry, FileStatus, StatusRecord
from gitnav.git.status_parser import StatusParser, parse_status

__all__ = [
    "BranchEntry",
    "FileEntry",
    "FileStatus",
    "GitError",
    "StatusParser",
    "StatusRecord",
    "add_paths",
    "checkout_branch",
    "checkout_paths",
    "create_branch",
    "diff_file",
    "find_repo_root",
    "get_status",
    "list_local_branches",
    "parse_status",
    "reset_paths",
]
