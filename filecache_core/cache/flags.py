"""FileCache Flags - Operation Flags and Producer Results.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Any, Optional


class CacheFlags(IntFlag):
    """Modifiers for read and write operations."""

    NONE = 0
    READ_ONLY = 0x1       # Never write
    NO_WRITE = 0x2        # Skip the write step
    NO_DELETE = 0x4       # Keep expired files on disk
    FORCE_READ = 0x6      # Same bits as NO_WRITE | NO_DELETE
    RETURN_HANDLE = 0x8   # Return the CacheFile instead of its data


class WriteAction(Enum):
    """What read_or_write does with a producer's result."""

    USE_VALUE = auto()    # Write the returned value
    REREAD = auto()       # Return what is on disk now
    SKIP_WRITE = auto()   # Write nothing, return None


@dataclass(frozen=True)
class ProducerResult:
    """Explicit result of a read_or_write producer.

    Attributes:
        action: Action to take
        value: Value to write for USE_VALUE
    """

    action: WriteAction = WriteAction.USE_VALUE
    value: Optional[Any] = None

    @classmethod
    def use(cls, value: Any) -> "ProducerResult":
        return cls(WriteAction.USE_VALUE, value)

    @classmethod
    def reread(cls) -> "ProducerResult":
        return cls(WriteAction.REREAD)

    @classmethod
    def skip(cls) -> "ProducerResult":
        return cls(WriteAction.SKIP_WRITE)


def has_flag(flags: Optional[int], flag: CacheFlags) -> bool:
    """Check if every bit of a flag is set."""
    return bool(flags) and (int(flags) & flag) == flag


def blocks_write(flags: Optional[int]) -> bool:
    """Check if flags suppress writing."""
    return has_flag(flags, CacheFlags.READ_ONLY) or has_flag(flags, CacheFlags.NO_WRITE)


__all__ = [
    "CacheFlags",
    "WriteAction",
    "ProducerResult",
    "has_flag",
    "blocks_write",
]
