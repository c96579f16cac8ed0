# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for BuildBench."""

from typing import Annotated

from cyclopts import App, Parameter

from buildbench import __version__
from buildbench.common.config import UserConfig

app = App(
    name="buildbench",
    help="Benchmark build times and binary sizes across a project's revision history.",
    version=__version__,
)


@app.command(name="run")
def run(
    user_config: Annotated[UserConfig | None, Parameter(name="*")] = None,
) -> None:
    """Benchmark every revision in the revision list.

    Progress is checkpointed before each revision and results are saved after it,
    so an interrupted run continues where it stopped when started again.
    """
    from buildbench.cli_runner import run_benchmark

    run_benchmark(user_config or UserConfig())


@app.command(name="list-revisions")
def list_revisions(
    user_config: Annotated[UserConfig | None, Parameter(name="*")] = None,
) -> None:
    """Generate the revision list by running --list-script against --project-dir."""
    from buildbench.cli_runner import generate_revisions

    generate_revisions(user_config or UserConfig())
