"""Data models for working tree status and branches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileStatus(str, Enum):
    MODIFIED = "Modified"
    ADDED = "Added"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    COPIED = "Copied"
    TYPE_CHANGED = "TypeChanged"
    UNTRACKED = "Untracked"
    UNMERGED = "Unmerged"

    @property
    def code(self) -> str:
        return _CODES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def sort_priority(self, staged: bool) -> int:
        """Bucket used to order status listings.

        Unmerged first, then staged changes, then unstaged changes in the same
        status order, then untracked files.
        """
        if self is FileStatus.UNMERGED:
            return 0
        if self is FileStatus.UNTRACKED:
            return 1 + 2 * len(_CHANGE_ORDER)
        offset = _CHANGE_ORDER.index(self)
        return 1 + offset if staged else 1 + len(_CHANGE_ORDER) + offset


_CHANGE_ORDER = (
    FileStatus.ADDED,
    FileStatus.MODIFIED,
    FileStatus.DELETED,
    FileStatus.RENAMED,
    FileStatus.COPIED,
    FileStatus.TYPE_CHANGED,
)

_CODES = {
    FileStatus.MODIFIED: "M",
    FileStatus.ADDED: "A",
    FileStatus.DELETED: "D",
    FileStatus.RENAMED: "R",
    FileStatus.COPIED: "C",
    FileStatus.TYPE_CHANGED: "T",
    FileStatus.UNTRACKED: "??",
    FileStatus.UNMERGED: "UU",
}

_DESCRIPTIONS = {
    FileStatus.MODIFIED: "modified",
    FileStatus.ADDED: "new",
    FileStatus.DELETED: "deleted",
    FileStatus.RENAMED: "renamed",
    FileStatus.COPIED: "copied",
    FileStatus.TYPE_CHANGED: "type changed",
    FileStatus.UNTRACKED: "untracked",
    FileStatus.UNMERGED: "both modified",
}


@dataclass(frozen=True)
class StatusRecord:
    """One (status, staged) observation for a path, before numbering."""

    path: str
    status: FileStatus
    staged: bool

    @property
    def sort_key(self) -> tuple[int, tuple[str, ...]]:
        # compare path components so "a/" sorts before "a.txt"
        return (self.status.sort_priority(self.staged), tuple(self.path.split("/")))


@dataclass(frozen=True)
class FileEntry:
    """A numbered file in a status snapshot."""

    index: int
    status: FileStatus
    path: str
    staged: bool

    @property
    def identity(self) -> tuple[str, FileStatus, bool]:
        return (self.path, self.status, self.staged)


CURRENT_BRANCH_INDEX = 0


@dataclass(frozen=True)
class BranchEntry:
    """A local branch. The current branch carries index 0 and is not selectable."""

    index: int
    name: str
    is_current: bool = False
