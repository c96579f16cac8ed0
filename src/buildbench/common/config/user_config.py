# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from pydantic import Field, field_validator

from buildbench.common.config.base_config import BaseConfig
from buildbench.common.config.build_config import BuildConfig
from buildbench.common.config.cli_parameter import CLIParameter
from buildbench.common.config.config_defaults import RunDefaults
from buildbench.common.config.groups import Groups
from buildbench.common.config.state_config import StateConfig


class UserConfig(BaseConfig):
    """Top-level configuration for a benchmark run."""

    _CLI_GROUP = Groups.RUN

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid log level: '{v}'. "
                "Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return level

    state: Annotated[
        StateConfig,
        Field(
            default_factory=StateConfig,
            description="State file configuration",
        ),
        Parameter(name="*"),
    ]

    build: Annotated[
        BuildConfig,
        Field(
            default_factory=BuildConfig,
            description="Build configuration",
        ),
        Parameter(name="*"),
    ]

    warmup: Annotated[
        bool,
        Field(
            description="Run one discarded build of the first revision before measuring, "
            "to absorb cold-start costs such as filesystem cache warming.",
        ),
        CLIParameter(
            name=("--warmup",),
            group=_CLI_GROUP,
        ),
    ] = RunDefaults.WARMUP

    fresh: Annotated[
        bool,
        Field(
            description="Ignore any stored checkpoint and results and start from the first "
            "revision. Existing state files are overwritten on the first save.",
        ),
        CLIParameter(
            name=("--fresh",),
            group=_CLI_GROUP,
        ),
    ] = RunDefaults.FRESH

    log_level: Annotated[
        str,
        Field(
            description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
        CLIParameter(
            name=("--log-level",),
            group=_CLI_GROUP,
        ),
    ] = RunDefaults.LOG_LEVEL

    log_file: Annotated[
        Path | None,
        Field(
            description="Optional file that receives a copy of all log output.",
        ),
        CLIParameter(
            name=("--log-file",),
            group=_CLI_GROUP,
        ),
    ] = RunDefaults.LOG_FILE
