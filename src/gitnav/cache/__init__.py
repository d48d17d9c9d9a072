"""Per-repository snapshot cache."""

from gitnav.cache.store import CacheBackend, CacheStore, FileCacheBackend, storage_key

__all__ = ["CacheBackend", "CacheStore", "FileCacheBackend", "storage_key"]
