"""Store module - Filesystem primitives for cache entries."""

from filecache_core.store.filesystem import (
    FileSystem,
    FileSystemStats,
)

__all__ = [
    "FileSystem",
    "FileSystemStats",
]
