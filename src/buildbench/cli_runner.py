# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from buildbench.cli_utils import raise_startup_error_and_exit
from buildbench.common.config import UserConfig
from buildbench.common.exceptions import (
    BuildBenchError,
    CorruptStateError,
    ExecutionError,
    PersistenceError,
    RevisionListError,
    UnknownCheckpointRevisionError,
)
from buildbench.common.logging import setup_rich_logging
from buildbench.orchestrator import (
    BenchmarkDriver,
    CheckpointStore,
    ResultStore,
    ShellBuildExecutor,
    generate_revision_list,
    load_revision_list,
    save_revision_list,
)

logger = logging.getLogger(__name__)

_ERROR_TITLES: list[tuple[type[BuildBenchError], str]] = [
    (RevisionListError, "Revision List Error"),
    (PersistenceError, "Persistence Error"),
    (CorruptStateError, "Corrupt State"),
    (UnknownCheckpointRevisionError, "Unknown Checkpoint Revision"),
    (ExecutionError, "Build Execution Failed"),
]


def _error_title(error: BuildBenchError) -> str:
    for error_type, title in _ERROR_TITLES:
        if isinstance(error, error_type):
            return title
    return "BuildBench Error"


def _exit_with_error(error: BuildBenchError) -> None:
    message = str(error)
    if isinstance(error, ExecutionError) and error.revision:
        message += (
            f"\n\nThe checkpoint still points at {error.revision}; "
            "run again to retry it from scratch."
        )
    raise_startup_error_and_exit(message, title=_error_title(error))


def run_benchmark(user_config: UserConfig) -> None:
    """Run (or resume) the benchmark described by `user_config`.

    Exits the process with status 1 on any BuildBench error.
    """
    setup_rich_logging(user_config)

    state = user_config.state
    logger.info("=" * 80)
    logger.info("Starting Build Benchmark")
    logger.info(f"  Project: {user_config.build.project_dir}")
    logger.info(f"  Revision list: {state.revision_list_file}")
    logger.info(f"  Checkpoint: {state.checkpoint_file}")
    logger.info(f"  Results: {state.results_file}")
    logger.info(f"  Warm-up: {'enabled' if user_config.warmup else 'disabled'}")
    if user_config.fresh:
        logger.info("  Fresh start: stored checkpoint and results will be discarded")
    logger.info(f"  Options: {user_config.to_json_dict() or 'defaults'}")
    logger.info("=" * 80)

    driver = BenchmarkDriver(
        checkpoint_store=CheckpointStore(state.checkpoint_file),
        result_store=ResultStore(state.results_file),
        executor=ShellBuildExecutor(user_config.build),
        warmup=user_config.warmup,
    )

    try:
        revisions = load_revision_list(state.revision_list_file)
        driver.run(revisions, fresh=user_config.fresh)
    except BuildBenchError as e:
        logger.error(f"Benchmark aborted: {e}")
        _exit_with_error(e)


def generate_revisions(user_config: UserConfig) -> None:
    """Write a fresh revision list produced by the configured listing script.

    Exits the process with status 1 on any BuildBench error.
    """
    setup_rich_logging(user_config)

    build = user_config.build
    state = user_config.state
    if build.list_script is None:
        raise_startup_error_and_exit(
            "No listing script configured. Pass --list-script <path> pointing at a "
            "script that prints one revision per line, newest first.",
            title="Configuration Error",
        )

    try:
        revisions = generate_revision_list(build.list_script, build.project_dir)
        _warn_if_checkpoint_orphaned(CheckpointStore(state.checkpoint_file), revisions)
        save_revision_list(state.revision_list_file, revisions)
    except BuildBenchError as e:
        logger.error(f"Revision listing aborted: {e}")
        _exit_with_error(e)

    logger.info(f"Wrote {len(revisions)} revisions to {state.revision_list_file}")


def _warn_if_checkpoint_orphaned(
    checkpoint_store: CheckpointStore, revisions: list[str]
) -> None:
    """Warn when the new list no longer contains the stored checkpoint."""
    try:
        checkpoint = checkpoint_store.load()
    except CorruptStateError as e:
        logger.warning(f"Ignoring unreadable checkpoint while listing revisions: {e}")
        return
    if checkpoint is not None and checkpoint not in revisions:
        logger.warning(
            f"The stored checkpoint {checkpoint} is not in the new revision list. "
            "The next run will fail until the checkpoint is removed or --fresh is used."
        )
