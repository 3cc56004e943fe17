"""FileCache Config - Cache Settings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from filecache_core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"


class CacheMode(Enum):
    """Global expiration policy."""

    PRODUCTION = "production"    # Real mtime comparison
    ALL_EXPIRE = "all_expire"    # Every entry is expired
    NO_EXPIRE = "no_expire"      # No entry ever expires

    @classmethod
    def parse(cls, value: Union[str, "CacheMode"]) -> "CacheMode":
        """Map a mode name to a mode, falling back to production.

        Args:
            value: Mode name or mode

        Returns:
            CacheMode instance
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown cache mode {value!r}, using production")
            return cls.PRODUCTION


@dataclass
class CacheSettings:
    """File cache configuration.

    Attributes:
        mode: Expiration mode name
        paths: Namespace to folder table, relative to the registry base directory
        default_chmod: Permission bits for automatically created folders
        cache_extension: Suffix appended to every entry file
        default_expired_time: Default expiration interval in seconds
    """

    mode: str = CacheMode.PRODUCTION.value
    paths: Dict[str, str] = field(default_factory=lambda: {DEFAULT_NAMESPACE: "cache/"})
    default_chmod: int = 0o700
    cache_extension: str = ".cache"
    default_expired_time: int = 3600

    def __post_init__(self):
        """Validate values."""
        if isinstance(self.mode, CacheMode):
            self.mode = self.mode.value
        if not isinstance(self.paths, Mapping):
            raise ConfigurationError(f"paths must be a mapping, got {type(self.paths).__name__}")
        self.paths = {str(k): str(v) for k, v in self.paths.items()}
        if isinstance(self.default_chmod, bool) or not isinstance(self.default_chmod, int):
            raise ConfigurationError(f"default_chmod must be an int, got {self.default_chmod!r}")
        if isinstance(self.default_expired_time, bool) or not isinstance(self.default_expired_time, int):
            raise ConfigurationError(
                f"default_expired_time must be an int, got {self.default_expired_time!r}"
            )
        if self.cache_extension is None:
            self.cache_extension = ""
        if DEFAULT_NAMESPACE not in self.paths:
            logger.warning("No 'default' cache path configured")
        self._mode = CacheMode.parse(self.mode)

    @property
    def cache_mode(self) -> CacheMode:
        """Get the effective mode."""
        return self._mode

    @property
    def extension(self) -> str:
        """Get the dot-prefixed file suffix, or an empty string."""
        ext = self.cache_extension
        if not isinstance(ext, str) or not ext:
            return ""
        return ext if ext.startswith(".") else f".{ext}"

    def folder_for(self, namespace: str) -> Optional[str]:
        """Get the configured folder for a namespace.

        Args:
            namespace: Namespace name

        Returns:
            Folder path, the default folder, or None if neither exists
        """
        if namespace in self.paths:
            return self.paths[namespace]
        return self.paths.get(DEFAULT_NAMESPACE)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CacheSettings":
        """Create from dictionary.

        Args:
            data: Dictionary data

        Returns:
            CacheSettings instance
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.debug(f"Ignoring unknown cache setting {key!r}")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CacheSettings":
        """Load settings from a JSON file.

        Args:
            path: JSON file path

        Returns:
            CacheSettings instance
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigurationError(f"Cache settings in {path} must be a JSON object")
        logger.debug(f"Loaded cache settings from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mode": self.mode,
            "paths": dict(self.paths),
            "default_chmod": self.default_chmod,
            "cache_extension": self.cache_extension,
            "default_expired_time": self.default_expired_time,
        }


__all__ = ["CacheMode", "CacheSettings", "DEFAULT_NAMESPACE"]
