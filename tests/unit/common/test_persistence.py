# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the atomic file persistence helpers."""

import errno
import os
import stat
from pathlib import Path
from unittest.mock import patch

import orjson
import pytest

from buildbench.common.exceptions import CorruptStateError, PersistenceError
from buildbench.common.persistence import (
    atomic_write_bytes,
    decode_json,
    read_bytes_if_exists,
    write_json,
)


class TestAtomicWriteBytes:
    """Tests for atomic_write_bytes."""

    def test_creates_file_and_parent_directories(self, tmp_path: Path):
        """Test that missing parent directories are created."""
        path = tmp_path / "nested" / "state" / "results.json"

        atomic_write_bytes(path, b"{}")

        assert path.read_bytes() == b"{}"

    def test_replaces_existing_content(self, tmp_path: Path):
        """Test that the destination is fully replaced, not appended to."""
        path = tmp_path / "results.json"
        path.write_bytes(b"a much longer previous payload")

        atomic_write_bytes(path, b"new")

        assert path.read_bytes() == b"new"

    def test_failed_rename_keeps_previous_content(self, tmp_path: Path):
        """Test that a failure before the rename leaves the old file intact."""
        path = tmp_path / "results.json"
        path.write_bytes(b"old")

        with (
            patch(
                "buildbench.common.persistence.os.replace",
                side_effect=OSError("No space left on device"),
            ),
            pytest.raises(PersistenceError, match="No space left on device") as exc_info,
        ):
            atomic_write_bytes(path, b"new")

        assert path.read_bytes() == b"old"
        assert exc_info.value.path == path
        assert [p.name for p in tmp_path.iterdir()] == ["results.json"]

    def test_fsync_failure_raises(self, tmp_path: Path):
        """Test that a failed data sync is a persistence failure."""
        path = tmp_path / "results.json"

        with (
            patch(
                "buildbench.common.persistence.os.fsync",
                side_effect=OSError("I/O error"),
            ),
            pytest.raises(PersistenceError, match="I/O error"),
        ):
            atomic_write_bytes(path, b"new")

        assert not path.exists()

    def test_directory_fsync_failure_raises(self, tmp_path: Path):
        """Test that a failed sync of the renamed directory entry is not ignored."""
        path = tmp_path / "commit_checkpoint.json"
        real_fsync = os.fsync

        def fsync_failing_on_directories(fd: int) -> None:
            if stat.S_ISDIR(os.fstat(fd).st_mode):
                raise OSError(errno.EIO, "Input/output error")
            real_fsync(fd)

        with (
            patch(
                "buildbench.common.persistence.os.fsync",
                side_effect=fsync_failing_on_directories,
            ),
            pytest.raises(PersistenceError, match="Input/output error"),
        ):
            atomic_write_bytes(path, b'"c1"')

    def test_directory_open_unsupported_is_tolerated(self, tmp_path: Path):
        """Test that platforms which cannot open directories still complete the write."""
        path = tmp_path / "commit_checkpoint.json"
        real_open = os.open

        def open_refusing_directories(target, flags, *args):
            if Path(target) == tmp_path:
                raise PermissionError(errno.EACCES, "Permission denied")
            return real_open(target, flags, *args)

        with patch(
            "buildbench.common.persistence.os.open",
            side_effect=open_refusing_directories,
        ):
            atomic_write_bytes(path, b'"c1"')

        assert path.read_bytes() == b'"c1"'

    def test_unwritable_directory_raises(self, tmp_path: Path):
        """Test that a parent that is a regular file surfaces as PersistenceError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(PersistenceError):
            atomic_write_bytes(blocker / "results.json", b"{}")


class TestReadBytesIfExists:
    """Tests for read_bytes_if_exists."""

    def test_missing_file_returns_none(self, tmp_path: Path):
        assert read_bytes_if_exists(tmp_path / "missing.json") is None

    def test_existing_file_returns_content(self, tmp_path: Path):
        path = tmp_path / "checkpoint.json"
        path.write_bytes(b'"c1"')

        assert read_bytes_if_exists(path) == b'"c1"'

    def test_directory_raises_persistence_error(self, tmp_path: Path):
        """Test that read failures other than a missing file are not swallowed."""
        with pytest.raises(PersistenceError):
            read_bytes_if_exists(tmp_path)


class TestJsonHelpers:
    """Tests for decode_json and write_json."""

    def test_decode_json_null_is_not_missing(self, tmp_path: Path):
        """Test that JSON null decodes to None rather than being an error."""
        assert decode_json(b"null", tmp_path / "x.json") is None

    def test_decode_invalid_json_raises_corrupt_state(self, tmp_path: Path):
        path = tmp_path / "x.json"

        with pytest.raises(CorruptStateError, match="not valid JSON") as exc_info:
            decode_json(b"{not json", path)

        assert exc_info.value.path == path

    def test_write_json_is_indented(self, tmp_path: Path):
        """Test that state files are written human-readable."""
        path = tmp_path / "results.json"

        write_json(path, {"debug": {"binary_size": {"c1": 1}}})

        content = path.read_bytes()
        assert b"\n  " in content
        assert orjson.loads(content) == {"debug": {"binary_size": {"c1": 1}}}
