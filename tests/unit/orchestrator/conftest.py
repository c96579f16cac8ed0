# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable, Iterable

import pytest

from buildbench.common.exceptions import ExecutionError
from buildbench.orchestrator.models import BuildMeasurements, ProfileMeasurements


def make_measurements(base: float = 1.0) -> BuildMeasurements:
    """Create BuildMeasurements whose values are all derived from `base`."""
    return BuildMeasurements(
        debug=ProfileMeasurements(
            full_build_time=base * 10,
            partial_build_time=base,
            binary_size=int(base * 1000),
        ),
        release=ProfileMeasurements(
            full_build_time=base * 20,
            partial_build_time=base * 2,
            binary_size=int(base * 500),
        ),
    )


class FakeBuildExecutor:
    """In-memory BuildExecutor that records calls and fails on request.

    Attributes:
        calls: Every revision passed to execute(), in call order
        fail_on: Revisions for which execute() raises ExecutionError
        on_execute: Optional hook invoked with the revision before measuring
    """

    def __init__(
        self,
        fail_on: Iterable[str] = (),
        on_execute: Callable[[str], None] | None = None,
    ) -> None:
        self.calls: list[str] = []
        self.fail_on = set(fail_on)
        self.on_execute = on_execute

    def execute(self, revision: str) -> BuildMeasurements:
        self.calls.append(revision)
        if self.on_execute is not None:
            self.on_execute(revision)
        if revision in self.fail_on:
            raise ExecutionError(
                f"debug full build failed for {revision} with exit code 101",
                revision=revision,
                step="debug full build",
                returncode=101,
            )
        return make_measurements(float(len(self.calls)))


@pytest.fixture
def fake_executor() -> FakeBuildExecutor:
    return FakeBuildExecutor()
