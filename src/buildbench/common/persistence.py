# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Durable single-file persistence helpers.

Writes go to a temporary file in the destination directory, are fsynced, and are then
renamed over the destination. A reader therefore sees either the previous content or
the new content, never a torn write.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import orjson

from buildbench.common.exceptions import CorruptStateError, PersistenceError

logger = logging.getLogger(__name__)

__all__ = [
    "atomic_write_bytes",
    "decode_json",
    "read_bytes_if_exists",
    "write_json",
]


def _fsync_directory(directory: Path) -> None:
    """Persist the directory entry of a freshly renamed file."""
    # Directories cannot be opened for fsync on every platform (e.g. Windows)
    try:
        fd = os.open(directory, os.O_RDONLY)
    except OSError:
        logger.debug(f"Directory fsync not supported for {directory}")
        return
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Atomically replace the contents of `path` with `data`.

    The data is synced to stable storage before this function returns.

    Args:
        path: Destination file
        data: Bytes to write

    Raises:
        PersistenceError: If the file cannot be written, synced, or renamed
    """
    path = Path(path)
    directory = path.parent
    tmp_name = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
        _fsync_directory(directory)
    except OSError as e:
        raise PersistenceError(f"Failed to write {path}: {e}", path=path) from e
    finally:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)


def read_bytes_if_exists(path: Path) -> bytes | None:
    """Read a file, returning None if it does not exist.

    Raises:
        PersistenceError: If the file exists but cannot be read
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise PersistenceError(f"Failed to read {path}: {e}", path=path) from e


def decode_json(raw: bytes, path: Path) -> Any:
    """Decode the JSON content read from `path`.

    Raises:
        CorruptStateError: If the content is not valid JSON
    """
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise CorruptStateError(
            f"State file {path} is not valid JSON: {e}", path=Path(path)
        ) from e


def write_json(path: Path, value: Any) -> None:
    """Serialize `value` with orjson and write it atomically."""
    atomic_write_bytes(path, orjson.dumps(value, option=orjson.OPT_INDENT_2))
