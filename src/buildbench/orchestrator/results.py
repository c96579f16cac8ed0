# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Durable accumulation of benchmark measurements."""

import logging
from pathlib import Path

from pydantic import ValidationError

from buildbench.common.enums import BuildProfile
from buildbench.common.exceptions import CorruptStateError
from buildbench.common.persistence import (
    decode_json,
    read_bytes_if_exists,
    write_json,
)
from buildbench.orchestrator.models import AllResults, BuildMeasurements

logger = logging.getLogger(__name__)

__all__ = [
    "ResultStore",
]


class ResultStore:
    """Loads and saves full snapshots of AllResults.

    Every save rewrites the whole file. Recording is a pure in-memory operation on an
    AllResults owned by the caller, who decides when to persist it.
    """

    def __init__(self, path: Path):
        """Initialize ResultStore.

        Args:
            path: JSON file holding the serialized AllResults
        """
        self.path = Path(path)

    def load(self) -> AllResults:
        """Return the persisted results, or empty results if no file exists.

        Raises:
            PersistenceError: If the results file exists but cannot be read
            CorruptStateError: If the results file does not match the AllResults schema
        """
        raw = read_bytes_if_exists(self.path)
        if raw is None:
            logger.info(f"No results file at {self.path}, starting with empty results")
            return AllResults()
        data = decode_json(raw, self.path)

        try:
            results = AllResults.model_validate(data)
        except ValidationError as e:
            raise CorruptStateError(
                f"Results file {self.path} is not a valid results snapshot: {e}",
                path=self.path,
            ) from e

        logger.info(
            f"Loaded results for {len(results.completed_revisions())} revisions from {self.path}"
        )
        return results

    def save(self, results: AllResults) -> None:
        """Durably replace the persisted snapshot with `results`.

        Raises:
            PersistenceError: If the results cannot be written or synced
        """
        write_json(self.path, results.model_dump(mode="json"))

    @staticmethod
    def record(
        results: AllResults,
        profile: BuildProfile,
        revision: str,
        full_build_time: float,
        partial_build_time: float,
        binary_size: int,
    ) -> None:
        """Append duration samples and overwrite the binary size for one profile."""
        results.profile(profile).record(
            revision, full_build_time, partial_build_time, binary_size
        )

    @classmethod
    def record_measurements(
        cls, results: AllResults, revision: str, measurements: BuildMeasurements
    ) -> None:
        """Record all measurements from one executor invocation, debug before release."""
        for profile in BuildProfile:
            m = measurements.for_profile(profile)
            cls.record(
                results,
                profile,
                revision,
                m.full_build_time,
                m.partial_build_time,
                m.binary_size,
            )
