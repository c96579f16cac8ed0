# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Parameter


class CLIParameter(Parameter):
    """Configuration for a CLI parameter.

    Subclass of cyclopts.Parameter carrying the defaults BuildBench uses for all of its
    CLI parameters, so every option renders the same way in the help output.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("show_env_var", False)
        super().__init__(*args, **kwargs)
