# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from typing import NoReturn

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def raise_startup_error_and_exit(
    message: str, title: str = "Error", exit_code: int = 1
) -> NoReturn:
    """Print an error panel to stderr and exit the process.

    Args:
        message: Error details shown inside the panel
        title: Panel title
        exit_code: Process exit status (must be non-zero)
    """
    console = Console(stderr=True)
    console.print(
        Panel(
            Text(message),
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
            expand=False,
        )
    )
    sys.exit(exit_code)
