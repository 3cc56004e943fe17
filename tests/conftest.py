"""Shared fixtures.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import os
import time

import pytest

from filecache_core.cache.cache import FileCache
from filecache_core.cache.registry import EntryRegistry
from filecache_core.config import CacheSettings


def make_cache(tmp_path, namespace="", **settings):
    """Build a cache rooted in a temporary directory."""
    registry = EntryRegistry(CacheSettings(**settings), base_dir=tmp_path)
    return FileCache(registry, namespace=namespace)


def age_file(path, seconds):
    """Move a file's mtime into the past."""
    old = time.time() - seconds
    os.utime(path, (old, old))


@pytest.fixture
def cache(tmp_path):
    return make_cache(tmp_path)
