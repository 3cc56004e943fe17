"""Tests for the cached decorator.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from filecache_core.cache.decorator import make_entry_name


def render(page_id, lang="en"):
    return f"{page_id}-{lang}"


class TestMakeEntryName:
    """Tests for entry name building."""

    def test_plain_name(self):
        """Test safe names are kept."""
        name = make_entry_name(render, (1,), {"lang": "fr"}, key_prefix="pages")
        assert name == "pages.render.1.lang=fr"

    def test_unsafe_name_is_hashed(self):
        """Test unsafe names become digests."""
        name = make_entry_name(render, ("a/b",), {})
        assert len(name) == 64
        assert "/" not in name

    def test_long_name_is_hashed(self):
        """Test long names become digests."""
        name = make_entry_name(render, ("x" * 300,), {})
        assert len(name) == 64

    def test_key_builder(self):
        """Test a custom builder."""
        name = make_entry_name(render, (7,), {}, key_builder=lambda page_id: f"page-{page_id}")
        assert name == "page-7"


class TestCached:
    """Tests for FileCache.cached."""

    def test_caches_result(self, cache):
        """Test the function runs once per arguments."""
        calls = []

        @cache.cached(expire=False, key_prefix="pages")
        def page(page_id):
            calls.append(page_id)
            return f"page {page_id}".encode()

        assert page(1) == b"page 1"
        assert page(1) == b"page 1"
        assert page(2) == b"page 2"
        assert calls == [1, 2]

    def test_clear_key(self, cache):
        """Test one call can be invalidated."""
        calls = []

        @cache.cached(expire=False, key_prefix="pages")
        def page(page_id):
            calls.append(page_id)
            return b"body"

        page(1)
        assert page.cache_clear_key(1) is True
        page(1)

        assert calls == [1, 1]
        assert len(page.entry_name(1)) == 64


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
