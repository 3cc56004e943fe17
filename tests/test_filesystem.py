"""Tests for FileSystem.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import os

import pytest

from filecache_core.errors import FilesystemFailure
from filecache_core.store.filesystem import FileSystem


class TestFileSystem:
    """Tests for filesystem primitives."""

    def test_write_and_read(self, tmp_path):
        """Test a locked write followed by a read."""
        fs = FileSystem()
        path = tmp_path / "entry"

        fs.write(path, b"data")

        assert fs.exists(path)
        assert fs.read(path) == b"data"
        assert not os.path.exists(f"{path}.tmp")

        stats = fs.get_stats()
        assert stats.writes == 1
        assert stats.reads == 1

    def test_write_replaces(self, tmp_path):
        """Test writes replace previous content."""
        fs = FileSystem()
        path = tmp_path / "entry"

        fs.write(path, b"a longer first value")
        fs.write(path, b"short")

        assert fs.read(path) == b"short"

    def test_write_below_a_file(self, tmp_path):
        """Test write failures are raised."""
        fs = FileSystem()
        (tmp_path / "file").write_bytes(b"")

        with pytest.raises(FilesystemFailure) as exc_info:
            fs.write(tmp_path / "file" / "entry", b"data")

        assert exc_info.value.operation == "write"
        assert fs.get_stats().errors == 1

    def test_read_missing(self, tmp_path):
        """Test read failures are raised."""
        with pytest.raises(FilesystemFailure):
            FileSystem().read(tmp_path / "missing")

    def test_mtime_missing(self, tmp_path):
        """Test stat failures are raised."""
        with pytest.raises(FilesystemFailure):
            FileSystem().mtime(tmp_path / "missing")

    def test_delete(self, tmp_path):
        """Test delete reports a boolean."""
        fs = FileSystem()
        path = tmp_path / "entry"
        fs.write(path, b"data")

        assert fs.delete(path) is True
        assert fs.delete(path) is False
        assert fs.get_stats().deletes == 1

    def test_delete_removes_lock_file(self, tmp_path):
        """Test delete also removes the write lock file."""
        fs = FileSystem()
        path = tmp_path / "entry"
        fs.write(path, b"data")

        assert fs.delete(path) is True
        assert os.listdir(tmp_path) == []

    def test_make_dirs_existing(self, tmp_path):
        """Test make_dirs tolerates an existing folder."""
        fs = FileSystem()
        fs.make_dirs(tmp_path / "a" / "b", 0o700)
        fs.make_dirs(tmp_path / "a" / "b", 0o700)

        assert (tmp_path / "a" / "b").is_dir()

    def test_make_dirs_over_file(self, tmp_path):
        """Test make_dirs fails when a file is in the way."""
        (tmp_path / "file").write_bytes(b"")

        with pytest.raises(FilesystemFailure):
            FileSystem().make_dirs(tmp_path / "file" / "sub", 0o700)

    def test_chmod(self, tmp_path):
        """Test permission bits."""
        fs = FileSystem()
        path = tmp_path / "entry"
        fs.write(path, b"data")
        fs.chmod(path, 0o604)

        assert os.stat(path).st_mode & 0o777 == 0o604

    def test_lock_released(self, tmp_path):
        """Test the write lock can be taken again after a write."""
        fs = FileSystem(lock_timeout=1)
        path = tmp_path / "entry"
        fs.write(path, b"data")

        with fs.locked(path):
            pass


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
