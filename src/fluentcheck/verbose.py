"""Logging configuration for assertion failure output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMATTER = logging.Formatter(
    fmt="[%(asctime)s] %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "fluentcheck",
) -> logging.Logger:
    """Route assertion failure messages to a file and/or stderr.

    Failures are logged at DEBUG by ``fluentcheck.execution.scope``, which
    propagates to the default ``fluentcheck`` logger configured here. Handlers
    from an earlier call on the same logger are closed and replaced.
    """
    outputs: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        outputs.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        outputs.append(logging.StreamHandler(sys.stderr))

    logger = logging.getLogger(logger_name)
    for previous in logger.handlers:
        previous.close()
    logger.handlers.clear()

    for handler in outputs:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(_FORMATTER)
        logger.addHandler(handler)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    return logger
