"""FileCache Decorators - Caching Decorators.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import functools
import hashlib
import logging
import re
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, Union

if TYPE_CHECKING:
    from filecache_core.cache.cache import FileCache

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

MAX_NAME_LENGTH = 200

_SAFE_NAME = re.compile(r"[A-Za-z0-9._=-]+")


def make_entry_name(
    func: Callable,
    args: tuple,
    kwargs: dict,
    key_prefix: Optional[str] = None,
    key_builder: Optional[Callable[..., str]] = None,
) -> str:
    """Build an entry name from a function call.

    Names that are not safe as file names, or too long, are replaced by
    their SHA-256 digest.

    Args:
        func: Function being cached
        args: Positional arguments
        kwargs: Keyword arguments
        key_prefix: Optional prefix
        key_builder: Custom name builder

    Returns:
        Entry name
    """
    if key_builder:
        name = key_builder(*args, **kwargs)
    else:
        parts = [key_prefix or func.__module__, func.__qualname__]
        parts.extend(str(arg) for arg in args)
        # Sorted for consistency
        parts.extend(f"{k}={kwargs[k]}" for k in sorted(kwargs))
        name = ".".join(parts)

    if len(name) > MAX_NAME_LENGTH or not _SAFE_NAME.fullmatch(name):
        name = hashlib.sha256(name.encode()).hexdigest()

    return name


def cached(
    cache: "FileCache",
    expire: Union[None, bool, int] = None,
    key_prefix: Optional[str] = None,
    key_builder: Optional[Callable[..., str]] = None,
) -> Callable[[F], F]:
    """Decorator to cache function results in files.

    The function must return bytes or text. It is only called when the
    entry is missing or expired.

    Args:
        cache: Cache to store results in
        expire: Expiration rule
        key_prefix: Prefix for entry names
        key_builder: Custom name builder

    Returns:
        Decorated function

    Example:
        @cached(pages, expire=600)
        def render(page_id):
            return template.render(page_id)
    """

    def decorator(func: F) -> F:
        def name_for(args: tuple, kwargs: dict) -> str:
            return make_entry_name(func, args, kwargs, key_prefix, key_builder)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            name = name_for(args, kwargs)

            def produce(entry):
                logger.debug(f"Computing {func.__qualname__} for {entry.path}")
                return func(*args, **kwargs)

            return cache.read_or_write(name, produce, expire)

        def cache_clear_key(*args, **kwargs) -> bool:
            """Remove the cached result of one call."""
            return cache.remove(name_for(args, kwargs))

        wrapper.cache_clear_key = cache_clear_key  # type: ignore
        wrapper.entry_name = lambda *a, **kw: name_for(a, kw)  # type: ignore

        return wrapper  # type: ignore

    return decorator


__all__ = ["cached", "make_entry_name"]
