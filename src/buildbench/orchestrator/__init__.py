# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Checkpointed, resumable benchmarking of a revision list."""

from buildbench.orchestrator.checkpoint import CheckpointStore
from buildbench.orchestrator.driver import BenchmarkDriver
from buildbench.orchestrator.executor import BuildExecutorProtocol, ShellBuildExecutor
from buildbench.orchestrator.models import (
    AllResults,
    BuildMeasurements,
    ProfileMeasurements,
    ProfileResults,
)
from buildbench.orchestrator.results import ResultStore
from buildbench.orchestrator.revisions import (
    generate_revision_list,
    load_revision_list,
    parse_revision_listing,
    save_revision_list,
)

__all__ = [
    "AllResults",
    "BenchmarkDriver",
    "BuildExecutorProtocol",
    "BuildMeasurements",
    "CheckpointStore",
    "ProfileMeasurements",
    "ProfileResults",
    "ResultStore",
    "ShellBuildExecutor",
    "generate_revision_list",
    "load_revision_list",
    "parse_revision_listing",
    "save_revision_list",
]
