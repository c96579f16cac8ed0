# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shlex
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator

from buildbench.common.config.base_config import BaseConfig
from buildbench.common.config.cli_parameter import CLIParameter
from buildbench.common.config.config_defaults import BuildDefaults
from buildbench.common.config.groups import Groups
from buildbench.common.enums import BuildProfile


class BuildConfig(BaseConfig):
    """How to check out, patch, build, and measure the target project."""

    _CLI_GROUP = Groups.BUILD

    @field_validator("clean_command", "build_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Reject commands that are empty or cannot be split into arguments."""
        try:
            parts = shlex.split(v)
        except ValueError as err:
            raise ValueError(f"Invalid command '{v}': {err}") from err
        if not parts:
            raise ValueError("Command must not be empty.")
        return v

    @field_validator("release_args")
    @classmethod
    def validate_release_args(cls, v: str) -> str:
        try:
            shlex.split(v)
        except ValueError as err:
            raise ValueError(f"Invalid release arguments '{v}': {err}") from err
        return v

    @field_validator("touch_file")
    @classmethod
    def validate_touch_file(cls, v: Path) -> Path:
        if v.is_absolute():
            raise ValueError(
                f"--touch-file must be relative to --project-dir (got '{v}')."
            )
        return v

    project_dir: Annotated[
        Path,
        Field(
            description="Working tree of the project being benchmarked. "
            "Local changes in it are discarded before every checkout.",
        ),
        CLIParameter(
            name=("--project-dir",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.PROJECT_DIR

    patch_script: Annotated[
        Path | None,
        Field(
            description="Script that applies compatibility patches after checkout. "
            "Invoked with the project directory as its only argument. "
            "When unset, no patch is applied.",
        ),
        CLIParameter(
            name=("--patch-script",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.PATCH_SCRIPT

    list_script: Annotated[
        Path | None,
        Field(
            description="Script that prints one revision per line, newest first. "
            "Used by `buildbench list-revisions`.",
        ),
        CLIParameter(
            name=("--list-script",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.LIST_SCRIPT

    clean_command: Annotated[
        str,
        Field(
            description="Command that removes all build artifacts before a full build.",
        ),
        CLIParameter(
            name=("--clean-command",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.CLEAN_COMMAND

    build_command: Annotated[
        str,
        Field(
            description="Command that builds the project in the debug profile.",
        ),
        CLIParameter(
            name=("--build-command",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.BUILD_COMMAND

    release_args: Annotated[
        str,
        Field(
            description="Extra arguments appended to --build-command for the release profile.",
        ),
        CLIParameter(
            name=("--release-args",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.RELEASE_ARGS

    touch_file: Annotated[
        Path,
        Field(
            description="Source file, relative to --project-dir, touched to trigger "
            "an incremental rebuild.",
        ),
        CLIParameter(
            name=("--touch-file",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.TOUCH_FILE

    binary_name: Annotated[
        str,
        Field(
            min_length=1,
            description="Name of the produced binary whose size is recorded.",
        ),
        CLIParameter(
            name=("--binary-name",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.BINARY_NAME

    target_dir: Annotated[
        Path,
        Field(
            description="Build output directory, relative to --project-dir. "
            "Binaries are read from <target-dir>/<profile>/<binary-name>.",
        ),
        CLIParameter(
            name=("--target-dir",),
            group=_CLI_GROUP,
        ),
    ] = BuildDefaults.TARGET_DIR

    def clean_argv(self) -> list[str]:
        return shlex.split(self.clean_command)

    def build_argv(self, profile: BuildProfile) -> list[str]:
        """Return the build command for `profile` as an argument list."""
        argv = shlex.split(self.build_command)
        if profile == BuildProfile.RELEASE:
            argv.extend(shlex.split(self.release_args))
        return argv

    def binary_path(self, profile: BuildProfile) -> Path:
        return self.project_dir / self.target_dir / profile.value / self.binary_name
