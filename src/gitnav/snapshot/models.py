"""Snapshot model and its cache record representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Union

from gitnav.git.models import BranchEntry, FileEntry, FileStatus

SnapshotKind = Literal["files", "branches"]
Entry = Union[FileEntry, BranchEntry]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Snapshot:
    """An ordered, numbered capture of one repository's files or branches."""

    kind: SnapshotKind
    repo_path: str
    entries: List[Entry] = field(default_factory=list)
    last_updated: datetime = field(default_factory=_now)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def selectable(self) -> List[Entry]:
        """Entries that own an index (every file; every non-current branch)."""
        if self.kind == "branches":
            return [b for b in self.entries if isinstance(b, BranchEntry) and not b.is_current]
        return list(self.entries)

    @property
    def current_branch(self) -> BranchEntry | None:
        for entry in self.entries:
            if isinstance(entry, BranchEntry) and entry.is_current:
                return entry
        return None


def _file_to_dict(entry: FileEntry) -> Dict[str, Any]:
    return {
        "index": entry.index,
        "status": entry.status.value,
        "path": entry.path,
        "staged": entry.staged,
    }


def _branch_to_dict(entry: BranchEntry) -> Dict[str, Any]:
    return {"index": entry.index, "name": entry.name, "is_current": entry.is_current}


def to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Convert a Snapshot to the JSON-serialisable cache record."""
    files = [_file_to_dict(e) for e in snapshot.entries if isinstance(e, FileEntry)]
    branches = [_branch_to_dict(e) for e in snapshot.entries if isinstance(e, BranchEntry)]
    return {
        "files": files,
        "branches": branches,
        "last_updated": snapshot.last_updated.isoformat(),
        "repo_path": snapshot.repo_path,
    }


def from_dict(data: Dict[str, Any], kind: SnapshotKind) -> Snapshot:
    """Rebuild the *kind* half of a cache record.

    Raises KeyError, TypeError or ValueError when the record has the wrong shape.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")

    entries: List[Entry]
    if kind == "files":
        entries = [
            FileEntry(
                index=int(item["index"]),
                status=FileStatus(item["status"]),
                path=str(item["path"]),
                staged=bool(item["staged"]),
            )
            for item in data["files"]
        ]
    else:
        entries = [
            BranchEntry(
                index=int(item["index"]),
                name=str(item["name"]),
                is_current=bool(item["is_current"]),
            )
            for item in data["branches"]
        ]

    return Snapshot(
        kind=kind,
        repo_path=str(data["repo_path"]),
        entries=entries,
        last_updated=datetime.fromisoformat(data["last_updated"]),
    )
