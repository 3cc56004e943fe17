"""FileCache - File-Backed Key/Value Cache.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

A small cache that stores every entry as one file:
- Entries grouped by namespace, each namespace mapped to a folder
- Expiration by file modification time
- Global modes to force or disable expiration
- Exclusive file lock around every write
- Read-or-write with explicit producer results

Architecture:
    ┌──────────────────────────────────────────────┐
    │  FileCache   read / write / read_or_write     │
    ├──────────────────────────────────────────────┤
    │  EntryRegistry   (namespace, name) -> entry   │
    ├──────────────────────────────────────────────┤
    │  CacheFile   memoized exists / data / mtime   │
    ├──────────────────────────────────────────────┤
    │  FileSystem   locked writes, stat, unlink     │
    └──────────────────────────────────────────────┘

Example Usage:
    from filecache_core import CacheSettings, EntryRegistry, FileCache

    registry = EntryRegistry(CacheSettings(paths={"default": "cache/"}))
    cache = FileCache(registry)

    cache.write("greeting", b"hello")
    cache.read("greeting", expire=60)       # b"hello"
    cache.read_or_write("report", build_report, expire=3600)

    # Namespaced caching
    pages = FileCache(registry, namespace="pages")
    pages.remove("home")
"""

__version__ = "1.0.0"
__author__ = "BlackRoad OS"

from filecache_core.config import CacheMode, CacheSettings
from filecache_core.errors import (
    FileCacheError,
    InvalidExpireArgument,
    FilesystemFailure,
    ConfigurationMissingDefault,
    ConfigurationError,
)
from filecache_core.store.filesystem import FileSystem, FileSystemStats
from filecache_core.cache.entry import CacheFile, LoadState
from filecache_core.cache.flags import CacheFlags, ProducerResult, WriteAction
from filecache_core.cache.registry import EntryRegistry
from filecache_core.cache.cache import CacheInterface, CacheStats, FileCache
from filecache_core.cache.decorator import cached

__all__ = [
    # Config
    "CacheMode",
    "CacheSettings",
    # Errors
    "FileCacheError",
    "InvalidExpireArgument",
    "FilesystemFailure",
    "ConfigurationMissingDefault",
    "ConfigurationError",
    # Storage
    "FileSystem",
    "FileSystemStats",
    # Cache
    "CacheFile",
    "LoadState",
    "CacheFlags",
    "ProducerResult",
    "WriteAction",
    "EntryRegistry",
    "CacheInterface",
    "CacheStats",
    "FileCache",
    "cached",
]
