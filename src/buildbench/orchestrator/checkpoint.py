# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Durable record of the revision currently being processed."""

import logging
from collections.abc import Sequence
from pathlib import Path

from buildbench.common.exceptions import (
    CorruptStateError,
    PersistenceError,
    UnknownCheckpointRevisionError,
)
from buildbench.common.persistence import (
    decode_json,
    read_bytes_if_exists,
    write_json,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CheckpointStore",
]


class CheckpointStore:
    """Stores the revision whose processing was most recently *started*.

    The checkpoint is written before a revision's builds run and before its results
    are saved. After a crash it may therefore point at a revision that has no results
    yet, which is why resuming redoes the checkpointed revision instead of skipping it.
    """

    def __init__(self, path: Path):
        """Initialize CheckpointStore.

        Args:
            path: JSON file holding the checkpointed revision as a single string
        """
        self.path = Path(path)

    def save(self, revision: str) -> None:
        """Durably replace the checkpoint with `revision`.

        Raises:
            PersistenceError: If the checkpoint cannot be written or synced
        """
        write_json(self.path, revision)
        logger.debug(f"Checkpoint saved: {revision}")

    def load(self) -> str | None:
        """Return the checkpointed revision, or None if no checkpoint exists.

        Raises:
            PersistenceError: If the checkpoint file exists but cannot be read
            CorruptStateError: If the checkpoint file does not hold a JSON string
        """
        raw = read_bytes_if_exists(self.path)
        if raw is None:
            return None
        value = decode_json(raw, self.path)
        if not isinstance(value, str):
            raise CorruptStateError(
                f"Checkpoint file {self.path} must contain a JSON string, "
                f"found {type(value).__name__}",
                path=self.path,
            )
        return value

    def clear(self) -> None:
        """Remove the checkpoint so the next run starts from the beginning."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(
                f"Failed to remove checkpoint {self.path}: {e}", path=self.path
            ) from e

    def resolve_resume_index(self, revisions: Sequence[str]) -> int:
        """Compute where processing resumes in `revisions`.

        Without a checkpoint this is 0. Otherwise it is the position of the
        checkpointed revision itself (not the one after it), so that a revision
        interrupted before its results were saved is processed again.

        Raises:
            UnknownCheckpointRevisionError: If the checkpointed revision is not in
                `revisions`
        """
        revision = self.load()
        if revision is None:
            logger.info("No checkpoint found, starting from the first revision")
            return 0

        try:
            index = list(revisions).index(revision)
        except ValueError:
            raise UnknownCheckpointRevisionError(revision) from None

        logger.info(f"Resuming at revision {index}/{len(revisions)}: {revision}")
        return index
