# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for BuildBench.

Every error is fatal to the run. The CLI layer logs it and exits non-zero, and the
persisted checkpoint lets the next invocation pick up where this one stopped.
"""

from pathlib import Path

__all__ = [
    "BuildBenchError",
    "CorruptStateError",
    "ExecutionError",
    "PersistenceError",
    "RevisionListError",
    "UnknownCheckpointRevisionError",
]


class BuildBenchError(Exception):
    """Base class for all BuildBench errors."""


class PersistenceError(BuildBenchError):
    """A state file could not be read, written, or synced to disk."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class RevisionListError(PersistenceError):
    """The revision list is missing, unreadable, or malformed."""


class CorruptStateError(BuildBenchError):
    """A persisted checkpoint or results file exists but cannot be deserialized."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnknownCheckpointRevisionError(BuildBenchError):
    """The checkpointed revision is not present in the current revision list."""

    def __init__(self, revision: str) -> None:
        super().__init__(
            f"Checkpoint refers to revision '{revision}', which is not in the revision list. "
            "The revision list was probably regenerated inconsistently. "
            "Restore the original list or remove the checkpoint file to start over."
        )
        self.revision = revision


class ExecutionError(BuildBenchError):
    """An external checkout, patch, or build step failed for a revision."""

    def __init__(
        self,
        message: str,
        *,
        revision: str | None = None,
        step: str | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.revision = revision
        self.step = step
        self.returncode = returncode
        self.stderr = stderr
