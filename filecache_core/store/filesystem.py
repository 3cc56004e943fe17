"""FileCache Filesystem - Filesystem Primitives.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

from filelock import FileLock

from filecache_core.errors import FilesystemFailure

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

LOCK_SUFFIX = ".lock"


@dataclass
class FileSystemStats:
    """Filesystem I/O statistics.

    Attributes:
        reads: Number of file reads
        writes: Number of file writes
        deletes: Number of successful deletes
        errors: Number of failed operations
    """

    reads: int = 0
    writes: int = 0
    deletes: int = 0
    errors: int = 0
    last_error: Optional[str] = None
    last_error_at: Optional[datetime] = None

    def record_error(self, error: str) -> None:
        """Record an error."""
        self.errors += 1
        self.last_error = error
        self.last_error_at = datetime.now()


class FileSystem:
    """Filesystem primitives used by cache entries.

    Every failure except a failed delete is raised as FilesystemFailure.
    Writes hold an exclusive lock on a sibling ``.lock`` file so that
    concurrent writers in other processes never interleave partial content.

    Example:
        fs = FileSystem()
        fs.make_dirs("/var/cache/app", 0o700)
        fs.write("/var/cache/app/key.cache", b"data")
    """

    def __init__(self, lock_timeout: float = -1):
        """Initialize filesystem.

        Args:
            lock_timeout: Seconds to wait for the write lock, -1 waits forever
        """
        self.lock_timeout = lock_timeout
        self._stats = FileSystemStats()

    def _fail(self, operation: str, path: PathLike, error: Exception) -> FilesystemFailure:
        self._stats.record_error(str(error))
        logger.error(f"Error during {operation} of {path}: {error}")
        return FilesystemFailure(operation, str(path), error)

    @contextmanager
    def locked(self, path: PathLike) -> Iterator[None]:
        """Hold the exclusive write lock for a path.

        Args:
            path: File path being written
        """
        lock = FileLock(f"{path}{LOCK_SUFFIX}", timeout=self.lock_timeout)
        with lock:
            yield

    def make_dirs(self, path: PathLike, mode: int) -> None:
        """Create a directory and its parents.

        Args:
            path: Directory path
            mode: Permission bits for created directories
        """
        try:
            os.makedirs(path, mode=mode, exist_ok=True)
        except OSError as e:
            raise self._fail("make_dirs", path, e) from e

    def exists(self, path: PathLike) -> bool:
        """Check if a file exists."""
        return os.path.isfile(path)

    def read(self, path: PathLike) -> bytes:
        """Read a file.

        Args:
            path: File path

        Returns:
            File content
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise self._fail("read", path, e) from e
        self._stats.reads += 1
        return data

    def write(self, path: PathLike, data: bytes) -> None:
        """Write a file under the exclusive lock.

        Args:
            path: File path
            data: Content to write
        """
        temp_path = f"{path}.tmp"

        try:
            with self.locked(path):
                try:
                    # Atomic write
                    with open(temp_path, "wb") as f:
                        f.write(data)
                    os.replace(temp_path, path)
                finally:
                    if os.path.exists(temp_path):
                        os.unlink(temp_path)
        except OSError as e:
            raise self._fail("write", path, e) from e

        self._stats.writes += 1

    def delete(self, path: PathLike) -> bool:
        """Delete a file.

        Args:
            path: File path

        Returns:
            True if deleted, False if missing or removal failed
        """
        try:
            os.unlink(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            self._stats.record_error(str(e))
            logger.warning(f"Error deleting {path}: {e}")
            return False

        self._stats.deletes += 1
        self._remove_lock_file(path)
        return True

    def _remove_lock_file(self, path: PathLike) -> None:
        lock_path = f"{path}{LOCK_SUFFIX}"
        try:
            os.unlink(lock_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Error deleting lock file {lock_path}: {e}")

    def mtime(self, path: PathLike) -> float:
        """Get modification time as epoch seconds."""
        try:
            return os.stat(path).st_mtime
        except OSError as e:
            raise self._fail("stat", path, e) from e

    def chmod(self, path: PathLike, mode: int) -> None:
        """Set file permission bits."""
        try:
            os.chmod(path, mode)
        except OSError as e:
            raise self._fail("chmod", path, e) from e

    def realpath(self, path: PathLike) -> str:
        """Get canonical path."""
        return os.path.realpath(path)

    def get_stats(self) -> FileSystemStats:
        """Get filesystem statistics."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset statistics."""
        self._stats = FileSystemStats()

    def __repr__(self) -> str:
        return f"FileSystem(lock_timeout={self.lock_timeout})"


__all__ = ["FileSystem", "FileSystemStats", "LOCK_SUFFIX"]
