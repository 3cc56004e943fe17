"""FileCache Cache - Public Cache Operations.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Union

from filecache_core.cache.decorator import cached
from filecache_core.cache.entry import CacheFile, CacheValue
from filecache_core.cache.flags import (
    CacheFlags,
    ProducerResult,
    WriteAction,
    blocks_write,
    has_flag,
)
from filecache_core.cache.registry import EntryRegistry
from filecache_core.config import CacheMode
from filecache_core.errors import InvalidExpireArgument

logger = logging.getLogger(__name__)

Expire = Union[None, bool, int]
Flags = Union[int, CacheFlags, None]


@dataclass
class CacheStats:
    """Cache statistics.

    Attributes:
        hits: Reads that returned a live entry
        misses: Reads that found nothing or an expired entry
        writes: Data writes
        deletes: Files removed
        expirations: Existing entries found expired
        producer_calls: Producers invoked by read_or_write
        started_at: When the cache was created
    """

    hits: int = 0
    misses: int = 0
    writes: int = 0
    deletes: int = 0
    expirations: int = 0
    producer_calls: int = 0
    started_at: Optional[datetime] = None

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def reset(self) -> None:
        """Reset statistics."""
        self.hits = 0
        self.misses = 0
        self.writes = 0
        self.deletes = 0
        self.expirations = 0
        self.producer_calls = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "writes": self.writes,
            "deletes": self.deletes,
            "expirations": self.expirations,
            "producer_calls": self.producer_calls,
            "hit_rate": self.hit_rate,
        }


class CacheInterface(ABC):
    """Minimal cache contract."""

    @abstractmethod
    def read(self, name: str, expire: Expire = None, flags: Flags = 0) -> Any:
        pass

    @abstractmethod
    def write(self, name: str, value: Optional[CacheValue] = None, flags: Flags = 0) -> Any:
        pass

    @abstractmethod
    def remove(self, name: str) -> bool:
        pass


class FileCache(CacheInterface):
    """File-backed cache bound to one namespace.

    Every entry is a file resolved through the shared EntryRegistry. The
    expire argument of read operations accepts:

    - None: the configured default_expired_time
    - True: always expired
    - False: never expired
    - int: expired after that many seconds, subject to the cache mode

    Example:
        registry = EntryRegistry(CacheSettings.load("cache.json"))
        pages = FileCache(registry, namespace="pages")

        html = pages.read_or_write("home", render_home, expire=600)
        pages.remove("home")
    """

    def __init__(
        self,
        registry: Optional[EntryRegistry] = None,
        namespace: str = "",
        path: str = "",
        folder_permission: Optional[int] = None,
    ):
        """Initialize cache.

        Args:
            registry: Shared entry registry
            namespace: Namespace ("type") of every entry
            path: Folder to use instead of the configured namespace folder
            folder_permission: Permission bits for created folders
        """
        self.registry = registry if registry is not None else EntryRegistry()
        self.namespace = namespace or ""
        self.path = path if isinstance(path, str) else ""
        self.folder_permission = folder_permission

        self._stats = CacheStats(started_at=datetime.now())

    @property
    def settings(self):
        return self.registry.settings

    def get_entry(self, name: str) -> CacheFile:
        """Resolve the entry for a name.

        Args:
            name: Entry name

        Returns:
            CacheFile instance
        """
        return self.registry.resolve(
            name,
            self.namespace,
            self.path,
            self.folder_permission,
        )

    def read(self, name: str, expire: Expire = None, flags: Flags = 0) -> Any:
        """Read an entry.

        Args:
            name: Entry name
            expire: Expiration rule
            flags: CacheFlags modifiers

        Returns:
            The data, the CacheFile with RETURN_HANDLE, or None if expired

        Raises:
            InvalidExpireArgument: If expire is not None, a bool or an int
        """
        entry = self.get_entry(name)

        if self._is_expired(entry, expire):
            self._stats.misses += 1
            if entry.exists():
                self._stats.expirations += 1

            if not has_flag(flags, CacheFlags.NO_DELETE):
                self.remove(name)

            logger.debug(f"Cache miss for {self._label(name)}")
            return None

        if entry.exists():
            self._stats.hits += 1
        else:
            self._stats.misses += 1

        if has_flag(flags, CacheFlags.RETURN_HANDLE):
            return entry
        return entry.get_data()

    def write(self, name: str, value: Optional[CacheValue] = None, flags: Flags = 0) -> Any:
        """Write an entry.

        Args:
            name: Entry name
            value: Bytes or text to store
            flags: CacheFlags modifiers

        Returns:
            The entry data, or the CacheFile with RETURN_HANDLE
        """
        entry = self.get_entry(name)

        if not blocks_write(flags):
            entry.set_data(value)
            self._stats.writes += 1

        if has_flag(flags, CacheFlags.RETURN_HANDLE):
            return entry
        return entry.get_data()

    def read_or_write(
        self,
        name: str,
        producer: Union[Callable[[CacheFile], Any], CacheValue, None],
        expire: Expire = None,
        flags: Flags = 0,
    ) -> Any:
        """Read an entry, writing it first when missing or expired.

        A callable producer receives the CacheFile and returns either a
        value to write or a ProducerResult. Any other producer is written
        as the value itself.

        Args:
            name: Entry name
            producer: Callable or literal value
            expire: Expiration rule
            flags: CacheFlags modifiers

        Returns:
            Whatever read or write returned
        """
        data = self.read(name, expire, flags)

        if data is not None or blocks_write(flags):
            return data

        write_flags = CacheFlags.NONE
        if has_flag(flags, CacheFlags.RETURN_HANDLE):
            write_flags = CacheFlags.RETURN_HANDLE

        if not callable(producer):
            return self.write(name, producer, write_flags)

        entry = self.get_entry(name)
        self._stats.producer_calls += 1
        result = producer(entry)

        if not isinstance(result, ProducerResult):
            result = ProducerResult.use(result)

        if result.action is WriteAction.REREAD:
            entry.reload()
            return entry if write_flags else entry.get_data()

        if result.action is WriteAction.SKIP_WRITE:
            return None

        return self.write(name, result.value, write_flags)

    def remove(self, name: str) -> bool:
        """Remove an entry and its file.

        Args:
            name: Entry name

        Returns:
            True if a file was deleted
        """
        deleted = self.get_entry(name).delete()
        self.registry.discard(name, self.namespace)

        if deleted:
            self._stats.deletes += 1
            logger.info(f"Removed {self._label(name)}")

        return deleted

    def is_entry_expired(self, name: str, expire: Expire = None) -> bool:
        """Check if an entry is expired.

        Args:
            name: Entry name
            expire: Expiration rule

        Returns:
            True if expired
        """
        return self._is_expired(self.get_entry(name), expire)

    def namespace_cache(self, namespace: str) -> "FileCache":
        """Get a cache for another namespace sharing this registry."""
        return FileCache(self.registry, namespace, self.path, self.folder_permission)

    def cached(
        self,
        expire: Expire = None,
        key_prefix: Optional[str] = None,
        key_builder: Optional[Callable[..., str]] = None,
    ) -> Callable:
        """Decorator caching a function's bytes or text result.

        Args:
            expire: Expiration rule
            key_prefix: Prefix for entry names
            key_builder: Custom entry name builder

        Returns:
            Decorator
        """
        return cached(self, expire=expire, key_prefix=key_prefix, key_builder=key_builder)

    def _is_expired(self, entry: CacheFile, expire: Expire) -> bool:
        if expire is None:
            expire = self.settings.default_expired_time

        if isinstance(expire, bool):
            return expire

        if not isinstance(expire, int):
            raise InvalidExpireArgument(expire)

        mode = self.settings.cache_mode
        if mode is CacheMode.ALL_EXPIRE:
            return True
        if mode is CacheMode.NO_EXPIRE:
            return False
        return entry.is_expired(expire)

    def _label(self, name: str) -> str:
        return f"{self.namespace or 'default'}:{name}"

    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset statistics."""
        self._stats.reset()

    def __repr__(self) -> str:
        return f"FileCache(namespace={self.namespace or 'default'!r}, registry={self.registry!r})"


__all__ = ["FileCache", "CacheInterface", "CacheStats"]
