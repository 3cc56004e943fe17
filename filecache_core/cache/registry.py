"""FileCache Registry - Entry Resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from filecache_core.cache.entry import CacheFile
from filecache_core.config import DEFAULT_NAMESPACE, CacheSettings
from filecache_core.errors import ConfigurationMissingDefault
from filecache_core.store.filesystem import FileSystem

logger = logging.getLogger(__name__)


class EntryRegistry:
    """Maps (namespace, name) keys to cache entries.

    One registry is built at startup and shared by every FileCache. It
    guarantees a single CacheFile per key, so all callers see the same
    memoized state. Folders are resolved from the settings path table and
    created on first use.

    Example:
        registry = EntryRegistry(CacheSettings(), base_dir="/srv/app")
        entry = registry.resolve("homepage", namespace="pages")
        assert registry.resolve("homepage", namespace="pages") is entry
    """

    def __init__(
        self,
        settings: Optional[CacheSettings] = None,
        base_dir: Union[str, os.PathLike] = ".",
        filesystem: Optional[FileSystem] = None,
    ):
        """Initialize registry.

        Args:
            settings: Cache settings
            base_dir: Directory that configured and override paths are relative to
            filesystem: Filesystem primitives shared by all entries
        """
        self.settings = settings if settings is not None else CacheSettings()
        self.base_dir = Path(base_dir)
        self.filesystem = filesystem if filesystem is not None else FileSystem()

        self._entries: Dict[str, Dict[str, CacheFile]] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _normalize(namespace: Optional[str]) -> str:
        return namespace or DEFAULT_NAMESPACE

    def resolve(
        self,
        name: str,
        namespace: Optional[str] = "",
        override_path: Optional[str] = "",
        folder_permission: Optional[int] = None,
    ) -> CacheFile:
        """Get or create the entry for a key.

        Args:
            name: Entry name
            namespace: Namespace, empty for the default one
            override_path: Folder to use instead of the configured one
            folder_permission: Permission bits for a created folder

        Returns:
            CacheFile instance

        Raises:
            ConfigurationMissingDefault: If no folder can be resolved
            FilesystemFailure: If the folder cannot be created
        """
        namespace = self._normalize(namespace)

        with self._lock:
            entries = self._entries.get(namespace)
            if entries is not None and name in entries:
                return entries[name]

            folder = self._resolve_folder(namespace, override_path)

            if not folder.is_dir():
                mode = folder_permission
                if isinstance(mode, bool) or not isinstance(mode, int):
                    mode = self.settings.default_chmod
                logger.info(f"Creating cache folder {folder} (mode {mode:o})")
                self.filesystem.make_dirs(folder, mode)

            path = folder / f"{name}{self.settings.extension}"
            entry = CacheFile(path, self.filesystem)

            self._entries.setdefault(namespace, {})[name] = entry
            logger.debug(f"Resolved {namespace}:{name} to {path}")

            return entry

    def _resolve_folder(self, namespace: str, override_path: Optional[str]) -> Path:
        if override_path:
            return self.base_dir / override_path

        folder = self.settings.folder_for(namespace)
        if folder is None:
            raise ConfigurationMissingDefault(namespace)

        return self.base_dir / folder

    def get(self, name: str, namespace: Optional[str] = "") -> Optional[CacheFile]:
        """Get an already resolved entry.

        Args:
            name: Entry name
            namespace: Namespace

        Returns:
            CacheFile or None
        """
        return self._entries.get(self._normalize(namespace), {}).get(name)

    def discard(self, name: str, namespace: Optional[str] = "") -> bool:
        """Drop an entry so the next resolve builds a fresh one.

        Args:
            name: Entry name
            namespace: Namespace

        Returns:
            True if an entry was dropped
        """
        with self._lock:
            entries = self._entries.get(self._normalize(namespace))
            if entries is None or name not in entries:
                return False
            del entries[name]
            return True

    def namespaces(self) -> List[str]:
        """List namespaces with at least one resolved entry."""
        return [ns for ns, entries in self._entries.items() if entries]

    def clear(self) -> int:
        """Drop every entry without touching the disk.

        Returns:
            Number of entries dropped
        """
        with self._lock:
            count = len(self)
            self._entries.clear()
            return count

    def __contains__(self, key: Tuple[str, str]) -> bool:
        """Check if a (namespace, name) key is resolved."""
        namespace, name = key
        return self.get(name, namespace) is not None

    def __len__(self) -> int:
        """Get resolved entry count."""
        return sum(len(entries) for entries in self._entries.values())

    def __iter__(self) -> Iterator[CacheFile]:
        """Iterate over resolved entries."""
        for entries in list(self._entries.values()):
            yield from list(entries.values())

    def __repr__(self) -> str:
        return f"EntryRegistry(base_dir={str(self.base_dir)!r}, entries={len(self)})"


__all__ = ["EntryRegistry"]
