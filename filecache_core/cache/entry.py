"""FileCache Entry - On-Disk Cache Slot.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar, Union

from filecache_core.store.filesystem import FileSystem

logger = logging.getLogger(__name__)

T = TypeVar("T")

CacheValue = Union[bytes, str]

FILE_MODE = 0o604


class LoadState(Enum):
    """Memoized field states."""

    UNLOADED = auto()    # Not read from disk yet
    LOADED = auto()      # Holds the last known value


@dataclass
class Memo(Generic[T]):
    """A lazily loaded value with an explicit load state."""

    state: LoadState = LoadState.UNLOADED
    value: Optional[T] = None

    @property
    def loaded(self) -> bool:
        return self.state is LoadState.LOADED

    def set(self, value: Optional[T]) -> None:
        self.value = value
        self.state = LoadState.LOADED

    def clear(self) -> None:
        self.value = None
        self.state = LoadState.UNLOADED


class CacheFile:
    """A single cache slot backed by one file.

    Existence, data and modification time are read from disk at most once
    and memoized. Writes update the memos in place.

    Example:
        entry = CacheFile("/var/cache/app/page.cache")
        entry.set_data(b"<html>")
        if not entry.is_expired(3600):
            html = entry.get_data()
    """

    def __init__(self, path: Union[str, os.PathLike], filesystem: Optional[FileSystem] = None):
        """Initialize entry.

        Args:
            path: Path of the backing file
            filesystem: Filesystem primitives
        """
        self.path = os.fspath(path)
        self.name = os.path.basename(self.path)
        self.folder = os.path.dirname(self.path)
        self._fs = filesystem if filesystem is not None else FileSystem()

        self._exists: Memo[bool] = Memo()
        self._modified_at: Memo[float] = Memo()
        self._data: Memo[CacheValue] = Memo()

    def exists(self) -> bool:
        """Check if the backing file exists.

        Returns:
            True if the file exists
        """
        if not self._exists.loaded:
            self._exists.set(self._fs.exists(self.path))
        return bool(self._exists.value)

    def get_data(self) -> Optional[CacheValue]:
        """Get the entry data.

        Returns:
            The data, or None if the file doesn't exist
        """
        if not self.exists():
            return None

        if not self._data.loaded:
            logger.debug(f"Loading {self.path}")
            self._data.set(self._fs.read(self.path))

        return self._data.value

    def set_data(self, value: Optional[CacheValue]) -> None:
        """Write the entry data.

        Args:
            value: Bytes, text (stored as UTF-8) or None for an empty file

        Raises:
            TypeError: If value is not bytes-like, text or None
        """
        if value is None:
            value = b""

        if isinstance(value, str):
            payload = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            payload = bytes(value)
        else:
            raise TypeError(
                f"Cache values must be bytes, str or None, got {type(value).__name__}"
            )
        self._fs.write(self.path, payload)
        self._fs.chmod(self.path, FILE_MODE)

        self._data.set(value)
        self._exists.set(True)
        self._update_modified_at()

    def delete(self) -> bool:
        """Delete the backing file.

        Returns:
            True if the file was deleted
        """
        if not self.exists():
            return False

        deleted = self._fs.delete(self.path)
        if deleted:
            self._exists.set(False)
            self._modified_at.clear()
        else:
            # Unknown state after a failed unlink
            self._exists.clear()
        return deleted

    def get_modified_at(self) -> Optional[float]:
        """Get the last modification time.

        Returns:
            Epoch seconds, or None if the file doesn't exist
        """
        if not self.exists():
            return None

        if not self._modified_at.loaded:
            self._update_modified_at()

        return self._modified_at.value

    def is_expired(self, interval_seconds: float) -> bool:
        """Check if the entry is older than an interval.

        Args:
            interval_seconds: Expiration interval

        Returns:
            True if expired or missing, False if valid
        """
        if not self.exists():
            return True

        modified_at = self.get_modified_at()
        if modified_at is None:
            return True

        return modified_at + interval_seconds <= time.time()

    def get_absolute_path(self) -> str:
        """Get the canonical path of the backing file."""
        return self._fs.realpath(self.path)

    def reload(self) -> None:
        """Forget every memoized value."""
        self._exists.clear()
        self._modified_at.clear()
        self._data.clear()

    def _update_modified_at(self) -> None:
        if self.exists():
            self._modified_at.set(self._fs.mtime(self.path))

    def __repr__(self) -> str:
        return f"CacheFile(path={self.path!r})"


__all__ = ["CacheFile", "CacheValue", "LoadState", "Memo", "FILE_MODE"]
