# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StateDefaults:
    REVISION_LIST_FILE = Path("CommitList.json")
    CHECKPOINT_FILE = Path("commit_checkpoint.json")
    RESULTS_FILE = Path("results.json")


@dataclass(frozen=True)
class BuildDefaults:
    PROJECT_DIR = Path("rav1e")
    PATCH_SCRIPT = None
    LIST_SCRIPT = None
    CLEAN_COMMAND = "cargo clean"
    BUILD_COMMAND = "cargo build"
    RELEASE_ARGS = "--release"
    TOUCH_FILE = Path("src/lib.rs")
    BINARY_NAME = "rav1e"
    TARGET_DIR = Path("target")


@dataclass(frozen=True)
class RunDefaults:
    WARMUP = True
    FRESH = False
    LOG_LEVEL = "INFO"
    LOG_FILE = None
