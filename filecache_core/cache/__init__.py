"""Cache module - Entries, registry and the public cache operations."""

from filecache_core.cache.entry import (
    CacheFile,
    LoadState,
    Memo,
)
from filecache_core.cache.flags import (
    CacheFlags,
    ProducerResult,
    WriteAction,
)
from filecache_core.cache.registry import EntryRegistry
from filecache_core.cache.cache import (
    CacheInterface,
    CacheStats,
    FileCache,
)
from filecache_core.cache.decorator import cached

__all__ = [
    "CacheFile",
    "LoadState",
    "Memo",
    "CacheFlags",
    "ProducerResult",
    "WriteAction",
    "EntryRegistry",
    "CacheInterface",
    "CacheStats",
    "FileCache",
    "cached",
]
