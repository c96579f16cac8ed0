# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import orjson
import pytest

from buildbench.common.config import BuildConfig, StateConfig, UserConfig
from buildbench.orchestrator.checkpoint import CheckpointStore
from buildbench.orchestrator.results import ResultStore


@pytest.fixture
def revisions() -> list[str]:
    """The revision list used by most driver tests."""
    return ["c1", "c2", "c3"]


@pytest.fixture
def state_config(tmp_path: Path) -> StateConfig:
    """State files placed in a temporary directory."""
    return StateConfig(
        revision_list_file=tmp_path / "CommitList.json",
        checkpoint_file=tmp_path / "commit_checkpoint.json",
        results_file=tmp_path / "results.json",
    )


@pytest.fixture
def revision_list_file(state_config: StateConfig, revisions: list[str]) -> Path:
    """Write the revision list fixture to disk."""
    state_config.revision_list_file.write_bytes(orjson.dumps(revisions))
    return state_config.revision_list_file


@pytest.fixture
def user_config(state_config: StateConfig, tmp_path: Path) -> UserConfig:
    """A UserConfig with temporary state files and warm-up disabled."""
    return UserConfig(
        state=state_config,
        build=BuildConfig(project_dir=tmp_path / "project"),
        warmup=False,
    )


@pytest.fixture
def checkpoint_store(state_config: StateConfig) -> CheckpointStore:
    return CheckpointStore(state_config.checkpoint_file)


@pytest.fixture
def result_store(state_config: StateConfig) -> ResultStore:
    return ResultStore(state_config.results_file)
