"""Compare a cached selection with a freshly built snapshot."""

from __future__ import annotations

from typing import Iterable, List

from gitnav.git.models import FileEntry
from gitnav.snapshot.models import Snapshot


def find_stale(selected: Iterable[FileEntry], fresh: Snapshot) -> List[FileEntry]:
    """Selected entries whose (path, status, staged) no longer appears in *fresh*.

    Index numbers are ignored: only the identity of the change matters.
    """
    live = {entry.identity for entry in fresh.entries if isinstance(entry, FileEntry)}
    return [entry for entry in selected if entry.identity not in live]
