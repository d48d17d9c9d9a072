"""Parser for ``git status --porcelain=v1 -z`` output.

Each record is ``XY<space>PATH`` terminated by NUL. Rename and copy records
are followed by a second NUL-terminated field holding the original path.
``X`` describes the index (staged side), ``Y`` the work tree.
"""

from __future__ import annotations

from typing import Generator, List

from gitnav.git.models import FileStatus, StatusRecord

_UNMERGED_PAIRS = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

_CODE_TO_STATUS = {
    "M": FileStatus.MODIFIED,
    "A": FileStatus.ADDED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "C": FileStatus.COPIED,
    "T": FileStatus.TYPE_CHANGED,
}


class StatusParser:
    """Turn raw porcelain output into :class:`StatusRecord` objects."""

    def __init__(self, raw: str) -> None:
        self._fields: List[str] = raw.split("\0")

    def parse(self) -> Generator[StatusRecord, None, None]:
        fields = self._fields
        idx = 0
        total = len(fields)

        while idx < total:
            field = fields[idx]
            idx += 1
            if len(field) < 4:
                # trailing empty field after the final NUL
                continue

            xy, path = field[:2], field[3:]
            x, y = xy[0], xy[1]

            if x in "RC" or y in "RC":
                idx += 1  # original path of a rename / copy

            if xy == "!!":
                continue
            if xy == "??":
                yield StatusRecord(path=path, status=FileStatus.UNTRACKED, staged=False)
                continue
            if xy in _UNMERGED_PAIRS:
                yield StatusRecord(path=path, status=FileStatus.UNMERGED, staged=False)
                continue

            staged = _CODE_TO_STATUS.get(x)
            if staged is not None:
                yield StatusRecord(path=path, status=staged, staged=True)
            unstaged = _CODE_TO_STATUS.get(y)
            if unstaged is not None:
                yield StatusRecord(path=path, status=unstaged, staged=False)


def parse_status(raw: str) -> List[StatusRecord]:
    return list(StatusParser(raw).parse())
