# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from buildbench.common.config.base_config import BaseConfig
from buildbench.common.config.build_config import BuildConfig
from buildbench.common.config.cli_parameter import CLIParameter
from buildbench.common.config.config_defaults import (
    BuildDefaults,
    RunDefaults,
    StateDefaults,
)
from buildbench.common.config.groups import Groups
from buildbench.common.config.state_config import StateConfig
from buildbench.common.config.user_config import UserConfig

__all__ = [
    "BaseConfig",
    "BuildConfig",
    "BuildDefaults",
    "CLIParameter",
    "Groups",
    "RunDefaults",
    "StateConfig",
    "StateDefaults",
    "UserConfig",
]
