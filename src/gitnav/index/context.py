"""Shared initialization for commands that take indices (add, reset, diff, ...).

Every such command goes through :func:`initialize`, so the same condition
always produces the same error whichever command hit it. Checks run in this
order and stop at the first failure:

1. no arguments at all
2. not inside a git repository
3. cache cannot be loaded
4. cache holds nothing selectable
5. arguments parse to no indices
6. indices out of bounds
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from gitnav.cache.store import LIST_COMMANDS, CacheStore
from gitnav.errors import (
    CacheEmptyError,
    CacheError,
    CacheLoadError,
    NoIndicesProvidedError,
    NothingAvailableError,
    NoValidIndicesError,
)
from gitnav.git.adapter import find_repo_root
from gitnav.git.models import FileEntry
from gitnav.index.parser import parse_args
from gitnav.index.validator import resolve
from gitnav.snapshot.models import Entry, Snapshot, SnapshotKind

log = logging.getLogger(__name__)

StoreFactory = Callable[[Path], CacheStore]


@dataclass
class IndexCommandContext:
    repo_root: Path
    snapshot: Snapshot
    indices: List[int]
    selected: List[Entry]

    @property
    def entry_count(self) -> int:
        return len(self.snapshot.selectable)

    @property
    def selected_count(self) -> int:
        return len(self.selected)

    @property
    def paths(self) -> List[str]:
        return [entry.path for entry in self.selected if isinstance(entry, FileEntry)]


def initialize(
    args: Optional[Sequence[str]],
    *,
    store_factory: StoreFactory,
    cwd: Optional[Path] = None,
    kind: SnapshotKind = "files",
    cache_error_msg: str = "Cannot load file cache",
    empty_msg: str = "No files available",
) -> IndexCommandContext:
    """Run the ordered checks and return the resolved selection."""
    if not args:
        raise NoIndicesProvidedError()

    repo_root = find_repo_root(cwd)
    list_command = LIST_COMMANDS[kind]

    store = store_factory(repo_root)
    try:
        snapshot = store.load(repo_root, kind)
    except CacheEmptyError as exc:
        raise NothingAvailableError(empty_msg, list_command) from exc
    except CacheError as exc:
        log.debug("Failed to load %s cache: %s", kind, exc)
        raise CacheLoadError(cache_error_msg, exc) from exc

    candidates = snapshot.selectable
    if not candidates:
        raise NothingAvailableError(empty_msg, list_command)

    indices = parse_args(args)
    if not indices:
        raise NoValidIndicesError()

    selected = resolve(indices, candidates)
    log.debug(
        "Initialized index command with %d entries and %d selected",
        len(candidates),
        len(selected),
    )
    return IndexCommandContext(
        repo_root=repo_root,
        snapshot=snapshot,
        indices=indices,
        selected=selected,
    )
