# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Build executors: check out a revision, build it, and measure the result."""

import logging
import subprocess
import time
from pathlib import Path
from typing import Protocol, runtime_checkable

from buildbench.common.config import BuildConfig
from buildbench.common.enums import BuildProfile
from buildbench.common.exceptions import ExecutionError
from buildbench.orchestrator.models import BuildMeasurements, ProfileMeasurements

logger = logging.getLogger(__name__)

__all__ = [
    "BuildExecutorProtocol",
    "ShellBuildExecutor",
]

_STDERR_TAIL_CHARS = 2000


@runtime_checkable
class BuildExecutorProtocol(Protocol):
    """Protocol for anything that can benchmark a single revision."""

    def execute(self, revision: str) -> BuildMeasurements:
        """Check out, patch, build, and measure `revision`.

        Raises:
            ExecutionError: If any sub-step fails. No partial measurements are returned.
        """
        ...


class ShellBuildExecutor:
    """Benchmarks a revision by invoking git, the patch script, and the build tool.

    Every step is re-runnable: local changes are discarded before checkout and the
    build directory is cleaned before each full build, so a revision interrupted
    half-way can be processed again from scratch.

    Per revision, in order:
    1. Discard local working-tree changes
    2. Check out the revision
    3. Apply the compatibility patch (if configured)
    4. For debug, then release: clean + full build, touch + incremental build,
       read the binary size
    """

    def __init__(self, build_config: BuildConfig):
        """Initialize ShellBuildExecutor.

        Args:
            build_config: Project location, build commands, and artifact layout
        """
        self.config = build_config

    def execute(self, revision: str) -> BuildMeasurements:
        project_dir = str(self.config.project_dir)

        self._run(revision, "discard", ["git", "-C", project_dir, "reset", "--hard"])
        self._run(
            revision,
            "checkout",
            ["git", "-C", project_dir, "checkout", "--quiet", revision],
        )
        if self.config.patch_script is not None:
            self._run(
                revision, "patch", [str(self.config.patch_script), project_dir]
            )

        measurements = {
            profile.value: self._measure_profile(revision, profile)
            for profile in BuildProfile
        }
        return BuildMeasurements(**measurements)

    def _measure_profile(
        self, revision: str, profile: BuildProfile
    ) -> ProfileMeasurements:
        """Run the full and incremental builds for one profile and read the binary size."""
        cwd = self.config.project_dir
        build_argv = self.config.build_argv(profile)

        start = time.perf_counter()
        self._run(revision, f"{profile} clean", self.config.clean_argv(), cwd=cwd)
        self._run(revision, f"{profile} full build", build_argv, cwd=cwd)
        full_build_time = time.perf_counter() - start

        start = time.perf_counter()
        self._touch(revision)
        self._run(revision, f"{profile} partial build", build_argv, cwd=cwd)
        partial_build_time = time.perf_counter() - start

        binary_size = self._binary_size(revision, profile)

        logger.debug(
            f"{revision} [{profile}] full={full_build_time:.2f}s "
            f"partial={partial_build_time:.2f}s size={binary_size}B"
        )
        return ProfileMeasurements(
            full_build_time=full_build_time,
            partial_build_time=partial_build_time,
            binary_size=binary_size,
        )

    def _touch(self, revision: str) -> None:
        path = self.config.project_dir / self.config.touch_file
        if not path.is_file():
            raise ExecutionError(
                f"Cannot trigger incremental build: {path} does not exist",
                revision=revision,
                step="touch",
            )
        path.touch()

    def _binary_size(self, revision: str, profile: BuildProfile) -> int:
        path = self.config.binary_path(profile)
        try:
            return path.stat().st_size
        except OSError as e:
            raise ExecutionError(
                f"Build produced no {profile} binary at {path}: {e}",
                revision=revision,
                step=f"{profile} binary size",
            ) from e

    def _run(
        self, revision: str, step: str, argv: list[str], cwd: Path | None = None
    ) -> None:
        """Run one external command, raising ExecutionError unless it exits with 0."""
        logger.debug(f"{revision} [{step}] $ {' '.join(argv)}")
        try:
            result = subprocess.run(argv, cwd=cwd, capture_output=True, text=True)
        except OSError as e:
            raise ExecutionError(
                f"Failed to start {step} for {revision}: {e}",
                revision=revision,
                step=step,
            ) from e

        if result.returncode != 0:
            error_msg = (
                f"{step} failed for {revision} with exit code {result.returncode}"
            )
            if result.stderr:
                error_msg += f"\nStderr: {result.stderr[-_STDERR_TAIL_CHARS:]}"
            raise ExecutionError(
                error_msg,
                revision=revision,
                step=step,
                returncode=result.returncode,
                stderr=result.stderr,
            )
