"""Snapshot cache: durable handoff between a list command and an act command.

Each CLI call is a separate process, so ``gitnav status`` writes its snapshot
here and ``gitnav add 3`` reads it back. Records are namespaced by a hash of
the repository path. There is no locking: concurrent writers race and the
last one wins. A record is advisory, never a source of truth.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from gitnav.errors import (
    CacheCorruptError,
    CacheEmptyError,
    CacheNotFoundError,
    CacheReadError,
    CacheWriteError,
)
from gitnav.snapshot.models import Snapshot, SnapshotKind, from_dict, to_dict

log = logging.getLogger(__name__)

LIST_COMMANDS = {"files": "gitnav status", "branches": "gitnav branches"}


def storage_key(repo_path: str | Path) -> str:
    """Stable, filesystem-safe key for a repository path."""
    absolute = str(Path(repo_path).expanduser().resolve())
    return hashlib.md5(absolute.encode("utf-8")).hexdigest()


class CacheBackend(Protocol):
    """Minimal key-value storage used by :class:`CacheStore`."""

    def location(self, key: str, name: str) -> Path: ...

    def read(self, key: str, name: str) -> Optional[str]:
        """Return stored text, or None when nothing is stored. May raise OSError."""
        ...

    def write(self, key: str, name: str, text: str) -> None: ...


class FileCacheBackend:
    """Stores each record at ``<root>/<key>/<name>.json``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def location(self, key: str, name: str) -> Path:
        return self.root / key / f"{name}.json"

    def read(self, key: str, name: str) -> Optional[str]:
        path = self.location(key, name)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, name: str, text: str) -> None:
        path = self.location(key, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


class CacheStore:
    """Save and load :class:`Snapshot` records through a backend."""

    def __init__(self, backend: CacheBackend) -> None:
        self.backend = backend

    @classmethod
    def at(cls, root: Path) -> "CacheStore":
        return cls(FileCacheBackend(root))

    def save(self, snapshot: Snapshot) -> Path:
        """Write *snapshot*. Raises CacheWriteError on any I/O failure."""
        key = storage_key(snapshot.repo_path)
        path = self.backend.location(key, snapshot.kind)
        log.debug("Saving %d %s to %s", len(snapshot), snapshot.kind, path)
        try:
            text = json.dumps(to_dict(snapshot), indent=2)
            self.backend.write(key, snapshot.kind, text)
        except (OSError, TypeError, ValueError) as exc:
            log.debug("Cache save failed for %s: %s", path, exc)
            raise CacheWriteError(path, exc) from exc
        return path

    def load(self, repo_path: str | Path, kind: SnapshotKind) -> Snapshot:
        """Load the *kind* snapshot for *repo_path*.

        Raises CacheNotFoundError, CacheReadError, CacheCorruptError or
        CacheEmptyError; each calls for a different fix.
        """
        key = storage_key(repo_path)
        path = self.backend.location(key, kind)
        list_command = LIST_COMMANDS[kind]
        log.debug("Loading %s cache from %s", kind, path)

        try:
            text = self.backend.read(key, kind)
        except OSError as exc:
            log.debug("Failed to read cache file %s: %s", path, exc)
            raise CacheReadError(path, exc) from exc
        if text is None:
            raise CacheNotFoundError(path, list_command)

        try:
            snapshot = from_dict(json.loads(text), kind)
        except (ValueError, KeyError, TypeError) as exc:
            log.debug("Failed to parse cache file %s: %s", path, exc)
            raise CacheCorruptError(path, exc) from exc

        if snapshot.is_empty:
            raise CacheEmptyError(kind, list_command)

        log.debug("Loaded %d %s from cache", len(snapshot), kind)
        return snapshot
