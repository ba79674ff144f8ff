"""Tests for filesystem helpers."""

import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from variantgen.errors import DeletionError, DirectoryError
from variantgen.filesystem import ensure_dir, remove_file


class TestEnsureDir:
    """Tests for ensure_dir()."""

    def test_creates_nested(self, tmp_path):
        path = str(tmp_path / 'a' / 'b' / 'c')

        assert ensure_dir(path) == path
        assert os.path.isdir(path)

    def test_existing_is_not_error(self, tmp_path):
        path = str(tmp_path / 'a')
        ensure_dir(path)

        ensure_dir(path)

        assert os.path.isdir(path)

    def test_concurrent_overlapping_paths(self, tmp_path):
        """Overlapping directories can be created from several threads at once."""
        paths = [str(tmp_path / 'root' / 'shared' / str(i % 3)) for i in range(12)]

        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(ensure_dir, paths))

        assert sorted(os.listdir(tmp_path / 'root' / 'shared')) == ['0', '1', '2']

    def test_file_in_the_way(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_bytes(b'')

        with pytest.raises(DirectoryError):
            ensure_dir(str(blocker / 'child'))


class TestRemoveFile:
    """Tests for remove_file()."""

    def test_removes_existing(self, tmp_path):
        path = tmp_path / 'x.jpg'
        path.write_bytes(b'data')

        assert remove_file(str(path)) is True
        assert not path.exists()

    def test_missing_is_not_error(self, tmp_path):
        assert remove_file(str(tmp_path / 'missing.jpg')) is False

    def test_missing_parent_is_not_error(self, tmp_path):
        assert remove_file(str(tmp_path / 'no' / 'such' / 'dir.jpg')) is False

    def test_other_failures_raise(self, tmp_path):
        """Deleting a directory fails for a reason other than absence."""
        path = tmp_path / 'adir'
        path.mkdir()

        with pytest.raises(DeletionError):
            remove_file(str(path))
