# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""BuildBench - Build Performance Benchmarking Across Revisions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("buildbench")
except PackageNotFoundError:
    __version__ = "unknown"
