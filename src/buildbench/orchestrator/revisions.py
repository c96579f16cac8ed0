# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Loading and generating the ordered list of revisions to benchmark."""

import logging
import subprocess
from collections import Counter
from pathlib import Path

import orjson

from buildbench.common.exceptions import ExecutionError, RevisionListError
from buildbench.common.persistence import write_json

logger = logging.getLogger(__name__)

__all__ = [
    "generate_revision_list",
    "load_revision_list",
    "parse_revision_listing",
    "save_revision_list",
]


def load_revision_list(path: Path) -> list[str]:
    """Load the revision list, oldest revision first.

    Args:
        path: JSON file containing an array of unique revision identifiers

    Returns:
        The revisions in processing order

    Raises:
        RevisionListError: If the file is missing, unreadable, not a JSON array of
            strings, or lists a revision more than once
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise RevisionListError(
            f"Cannot read revision list {path}: {e}. "
            "Generate it with `buildbench list-revisions`.",
            path=path,
        ) from e

    try:
        revisions = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise RevisionListError(
            f"Revision list {path} is not valid JSON: {e}", path=path
        ) from e

    if not isinstance(revisions, list) or not all(
        isinstance(r, str) and r for r in revisions
    ):
        raise RevisionListError(
            f"Revision list {path} must be a JSON array of non-empty strings",
            path=path,
        )

    # Resume resolution looks revisions up by value, so they must be unique
    duplicates = sorted(r for r, count in Counter(revisions).items() if count > 1)
    if duplicates:
        raise RevisionListError(
            f"Revision list {path} contains duplicate revisions: "
            f"{', '.join(duplicates)}",
            path=path,
        )

    logger.debug(f"Loaded {len(revisions)} revisions from {path}")
    return revisions


def save_revision_list(path: Path, revisions: list[str]) -> None:
    """Atomically write `revisions` as the JSON revision list."""
    write_json(path, revisions)


def parse_revision_listing(stdout: str) -> list[str]:
    """Turn newest-first listing output into an oldest-first revision list.

    Blank lines and surrounding whitespace are ignored.
    """
    lines = [line.strip() for line in stdout.splitlines()]
    return [line for line in reversed(lines) if line]


def generate_revision_list(list_script: Path, project_dir: Path) -> list[str]:
    """Run the external listing script and return its revisions, oldest first.

    The script is invoked with the project directory as its only argument and must
    print one revision per line, newest first.

    Raises:
        ExecutionError: If the script cannot be started or exits non-zero
    """
    command = [str(list_script), str(project_dir)]
    logger.info(f"Listing revisions: {' '.join(command)}")
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise ExecutionError(
            f"Failed to run revision listing script {list_script}: {e}",
            step="list-revisions",
        ) from e

    if result.returncode != 0:
        error_msg = f"Revision listing failed with exit code {result.returncode}"
        if result.stderr:
            error_msg += f"\nStderr: {result.stderr[-2000:]}"
        raise ExecutionError(
            error_msg,
            step="list-revisions",
            returncode=result.returncode,
            stderr=result.stderr,
        )

    revisions = parse_revision_listing(result.stdout)
    logger.info(f"Found {len(revisions)} revisions")
    return revisions
