# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-output groups for the CLI parameters."""

    STATE = Group.create_ordered("State Files")
    BUILD = Group.create_ordered("Build")
    RUN = Group.create_ordered("Run")
