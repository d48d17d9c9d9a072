"""Build numbered snapshots of the working tree and of local branches.

This module is the only place indices are assigned. Files are ordered by
``FileStatus.sort_priority`` and then by path; branches by name with the
current branch excluded from numbering.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from gitnav.git import adapter
from gitnav.git.models import CURRENT_BRANCH_INDEX, BranchEntry, FileEntry, StatusRecord
from gitnav.git.status_parser import parse_status
from gitnav.snapshot.models import Snapshot

log = logging.getLogger(__name__)


def number_files(records: Iterable[StatusRecord]) -> List[FileEntry]:
    """Sort status records and assign 1-based indices by final position."""
    ordered = sorted(records, key=lambda r: r.sort_key)
    return [
        FileEntry(index=i, status=r.status, path=r.path, staged=r.staged)
        for i, r in enumerate(ordered, start=1)
    ]


def number_branches(names: Iterable[str], current: Optional[str]) -> List[BranchEntry]:
    """Current branch first (index 0), then the others numbered by name."""
    ordered = sorted(set(names))
    branches: List[BranchEntry] = []
    if current is not None and current in ordered:
        branches.append(BranchEntry(index=CURRENT_BRANCH_INDEX, name=current, is_current=True))

    others = [name for name in ordered if name != current]
    branches.extend(
        BranchEntry(index=i, name=name) for i, name in enumerate(others, start=1)
    )
    return branches


def build_file_snapshot(repo_root: Path) -> Snapshot:
    records = parse_status(adapter.get_status(repo_root))
    entries = number_files(records)
    log.debug("Built file snapshot with %d entries for %s", len(entries), repo_root)
    return Snapshot(kind="files", repo_path=str(repo_root), entries=list(entries))


def build_branch_snapshot(repo_root: Path) -> Snapshot:
    names = adapter.list_local_branches(repo_root)
    current = adapter.get_current_branch(repo_root)
    entries = number_branches(names, current)
    log.debug("Built branch snapshot with %d entries for %s", len(entries), repo_root)
    return Snapshot(kind="branches", repo_path=str(repo_root), entries=list(entries))
