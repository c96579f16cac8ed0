# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from buildbench.common.config import UserConfig

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_PLAIN_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_rich_logging(user_config: UserConfig) -> None:
    """Configure the root logger for a BuildBench command.

    Uses a Rich handler on stderr when attached to a terminal and a plain stream
    handler otherwise (e.g. under a process supervisor). When a log file is
    configured, all records are also appended to it.
    """
    level = logging.getLevelName(user_config.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if sys.stderr.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt=_DATE_FORMAT))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt=_DATE_FORMAT))
    handler.setLevel(level)
    root_logger.addHandler(handler)

    if user_config.log_file:
        user_config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            user_config.log_file, mode="a", encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.debug(
        f"Logging configured: level={user_config.log_level}, file={user_config.log_file}"
    )
