# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for accumulated benchmark results."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from buildbench.common.enums import BuildProfile

__all__ = [
    "AllResults",
    "BuildMeasurements",
    "ByteCount",
    "DurationSeconds",
    "ProfileMeasurements",
    "ProfileResults",
]

DurationSeconds = Annotated[float, Field(ge=0)]
ByteCount = Annotated[int, Field(ge=0)]


class ProfileResults(BaseModel):
    """Accumulated measurements for one build profile, keyed by revision.

    Attributes:
        full_build_times: Clean build durations in seconds, one sample per time the
            revision was processed, in processing order
        partial_build_times: Incremental rebuild durations in seconds, same semantics
        binary_size: Size in bytes of the produced binary; reprocessing overwrites it
    """

    model_config = ConfigDict(extra="forbid")

    full_build_times: dict[str, list[DurationSeconds]] = Field(default_factory=dict)
    partial_build_times: dict[str, list[DurationSeconds]] = Field(
        default_factory=dict
    )
    binary_size: dict[str, ByteCount] = Field(default_factory=dict)

    def record(
        self,
        revision: str,
        full_build_time: float,
        partial_build_time: float,
        binary_size: int,
    ) -> None:
        """Append both duration samples and overwrite the size for `revision`.

        Raises:
            ValueError: If any measurement is negative
        """
        if full_build_time < 0 or partial_build_time < 0:
            raise ValueError(
                f"Build durations must be non-negative, got full={full_build_time} "
                f"partial={partial_build_time} for revision {revision}"
            )
        if binary_size < 0:
            raise ValueError(
                f"Binary size must be non-negative, got {binary_size} for revision {revision}"
            )
        self.full_build_times.setdefault(revision, []).append(float(full_build_time))
        self.partial_build_times.setdefault(revision, []).append(
            float(partial_build_time)
        )
        self.binary_size[revision] = int(binary_size)


class AllResults(BaseModel):
    """The full accumulated state of a benchmark run: one ProfileResults per profile."""

    model_config = ConfigDict(extra="forbid")

    debug: ProfileResults = Field(default_factory=ProfileResults)
    release: ProfileResults = Field(default_factory=ProfileResults)

    def profile(self, profile: BuildProfile) -> ProfileResults:
        """Return the results for `profile`."""
        return getattr(self, BuildProfile(profile).value)

    def completed_revisions(self) -> set[str]:
        """Revisions that have a size entry in every profile."""
        return set.intersection(
            *(set(self.profile(p).binary_size) for p in BuildProfile)
        )


class ProfileMeasurements(BaseModel):
    """Measurements taken for one profile of one revision."""

    model_config = ConfigDict(frozen=True)

    full_build_time: DurationSeconds
    partial_build_time: DurationSeconds
    binary_size: ByteCount


class BuildMeasurements(BaseModel):
    """Everything a single BuildExecutor invocation measures for a revision."""

    model_config = ConfigDict(frozen=True)

    debug: ProfileMeasurements
    release: ProfileMeasurements

    def for_profile(self, profile: BuildProfile) -> ProfileMeasurements:
        return getattr(self, BuildProfile(profile).value)
