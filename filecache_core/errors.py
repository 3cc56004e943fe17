"""FileCache Errors - Exception Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


class FileCacheError(Exception):
    """Base class for all cache errors."""


class InvalidExpireArgument(FileCacheError, TypeError):
    """Raised when an expire value is not None, a bool or an int."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"expire must be None, a bool or an int, got {type(value).__name__}: {value!r}"
        )


class FilesystemFailure(FileCacheError, OSError):
    """Raised when a filesystem primitive fails.

    Attributes:
        operation: Name of the failed primitive
        path: Path the primitive was applied to
    """

    def __init__(self, operation: str, path: str, cause: Exception):
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"{operation} failed for {path}: {cause}")


class ConfigurationMissingDefault(FileCacheError, KeyError):
    """Raised when a namespace has no folder and no default is configured."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(
            f"No path configured for namespace '{namespace}' and no 'default' path"
        )

    def __str__(self) -> str:
        return self.args[0]


class ConfigurationError(FileCacheError, ValueError):
    """Raised when cache settings hold invalid values."""


__all__ = [
    "FileCacheError",
    "InvalidExpireArgument",
    "FilesystemFailure",
    "ConfigurationMissingDefault",
    "ConfigurationError",
]
