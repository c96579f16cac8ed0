# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated

from pydantic import Field, model_validator

from buildbench.common.config.base_config import BaseConfig
from buildbench.common.config.cli_parameter import CLIParameter
from buildbench.common.config.config_defaults import StateDefaults
from buildbench.common.config.groups import Groups


class StateConfig(BaseConfig):
    """Locations of the files that make a benchmark run resumable."""

    _CLI_GROUP = Groups.STATE

    revision_list_file: Annotated[
        Path,
        Field(
            description="JSON array of revision identifiers to benchmark, oldest first. "
            "Read once at startup; generate it with `buildbench list-revisions`.",
        ),
        CLIParameter(
            name=("--revision-list",),
            group=_CLI_GROUP,
        ),
    ] = StateDefaults.REVISION_LIST_FILE

    checkpoint_file: Annotated[
        Path,
        Field(
            description="File recording the revision whose processing was last started. "
            "Rewritten before each revision is processed.",
        ),
        CLIParameter(
            name=("--checkpoint-file",),
            group=_CLI_GROUP,
        ),
    ] = StateDefaults.CHECKPOINT_FILE

    results_file: Annotated[
        Path,
        Field(
            description="File holding all accumulated measurements. "
            "Rewritten in full after each revision completes.",
        ),
        CLIParameter(
            name=("--results-file",),
            group=_CLI_GROUP,
        ),
    ] = StateDefaults.RESULTS_FILE

    @model_validator(mode="after")
    def validate_distinct_files(self) -> "StateConfig":
        """Ensure the state files do not overwrite each other."""
        paths = [self.revision_list_file, self.checkpoint_file, self.results_file]
        resolved = {p.resolve() for p in paths}
        if len(resolved) != len(paths):
            raise ValueError(
                "--revision-list, --checkpoint-file and --results-file must all point to "
                f"different files (got {', '.join(str(p) for p in paths)})."
            )
        return self
