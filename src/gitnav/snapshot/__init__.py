"""Numbered snapshots of repository state."""

from gitnav.snapshot.builder import (
    build_branch_snapshot,
    build_file_snapshot,
    number_branches,
    number_files,
)
from gitnav.snapshot.models import Snapshot, SnapshotKind, from_dict, to_dict
from gitnav.snapshot.staleness import find_stale

__all__ = [
    "Snapshot",
    "SnapshotKind",
    "build_branch_snapshot",
    "build_file_snapshot",
    "find_stale",
    "from_dict",
    "number_branches",
    "number_files",
    "to_dict",
]
