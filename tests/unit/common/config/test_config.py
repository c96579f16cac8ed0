# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for configuration models and their validators."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from buildbench.common.config import (
    BuildConfig,
    BuildDefaults,
    StateConfig,
    StateDefaults,
    UserConfig,
)
from buildbench.common.enums import BuildProfile


class TestStateConfig:
    """Tests for StateConfig."""

    def test_defaults_match_legacy_file_names(self):
        """Test that default file names are those earlier runs left behind."""
        config = StateConfig()

        assert config.revision_list_file == Path("CommitList.json")
        assert config.checkpoint_file == Path("commit_checkpoint.json")
        assert config.results_file == Path("results.json")
        assert config.results_file == StateDefaults.RESULTS_FILE

    @pytest.mark.parametrize(
        "overrides",
        [
            {"checkpoint_file": Path("results.json")},
            {"revision_list_file": Path("state.json"), "results_file": Path("state.json")},
            {"checkpoint_file": Path("./CommitList.json")},
        ],
    )
    def test_state_files_must_be_distinct(self, overrides):
        """Test that two state roles pointing at one file are rejected."""
        with pytest.raises(ValidationError, match="different files"):
            StateConfig(**overrides)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            StateConfig(checkpoint="c.json")


class TestBuildConfig:
    """Tests for BuildConfig."""

    def test_defaults(self):
        """Test the defaults describe a cargo project named rav1e."""
        config = BuildConfig()

        assert config.project_dir == BuildDefaults.PROJECT_DIR
        assert config.patch_script is None
        assert config.clean_argv() == ["cargo", "clean"]
        assert config.build_argv(BuildProfile.DEBUG) == ["cargo", "build"]
        assert config.build_argv(BuildProfile.RELEASE) == ["cargo", "build", "--release"]

    def test_binary_path_per_profile(self, tmp_path: Path):
        config = BuildConfig(project_dir=tmp_path)

        assert config.binary_path(BuildProfile.DEBUG) == tmp_path / "target/debug/rav1e"
        assert config.binary_path(BuildProfile.RELEASE) == (
            tmp_path / "target/release/rav1e"
        )

    def test_quoted_arguments_are_preserved(self):
        """Test that shell-style quoting groups arguments."""
        config = BuildConfig(
            build_command='cargo build --features "asm nasm"', release_args=""
        )

        assert config.build_argv(BuildProfile.RELEASE) == [
            "cargo",
            "build",
            "--features",
            "asm nasm",
        ]

    @pytest.mark.parametrize("command", ["", "   ", "cargo 'build"])
    def test_invalid_build_command(self, command: str):
        with pytest.raises(ValidationError):
            BuildConfig(build_command=command)

    def test_invalid_clean_command(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            BuildConfig(clean_command="")

    def test_unbalanced_release_args(self):
        with pytest.raises(ValidationError, match="Invalid release arguments"):
            BuildConfig(release_args='--features "asm')

    def test_absolute_touch_file_rejected(self):
        """Test that the touch file must live inside the project."""
        with pytest.raises(ValidationError, match="relative to --project-dir"):
            BuildConfig(touch_file=Path("/etc/hosts"))

    def test_empty_binary_name_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfig(binary_name="")

    def test_validate_assignment(self):
        """Test that validators also run on attribute assignment."""
        config = BuildConfig()

        with pytest.raises(ValidationError):
            config.build_command = ""


class TestUserConfig:
    """Tests for UserConfig."""

    def test_defaults(self):
        config = UserConfig()

        assert config.warmup is True
        assert config.fresh is False
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert isinstance(config.state, StateConfig)
        assert isinstance(config.build, BuildConfig)

    @pytest.mark.parametrize("value", ["debug", " Warning ", "ERROR"])
    def test_log_level_normalized(self, value: str):
        """Test that log level names are accepted case-insensitively."""
        assert UserConfig(log_level=value).log_level == value.strip().upper()

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            UserConfig(log_level="chatty")

    def test_to_json_dict_only_includes_overrides(self):
        """Test that only explicitly changed options are reported."""
        config = UserConfig(fresh=True, build=BuildConfig(binary_name="rav1e-cli"))

        assert config.to_json_dict() == {
            "fresh": True,
            "build": {"binary_name": "rav1e-cli"},
        }
