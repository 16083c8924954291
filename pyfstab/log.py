#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Logging setup for the command line tools."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Tuple

DEFAULT_LOG_FORMATTER = logging.Formatter(
    "[%(asctime)s] - [%(levelname)s] - [%(name)s] - %(message)s"
)


def init_logger(
    logger_name: str,
    log_dir: str,
    log_name: str,
    log_formatter: Optional[logging.Formatter] = DEFAULT_LOG_FORMATTER,
    log_level: int = logging.INFO,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 2,
    log_stderr: bool = False,
) -> Tuple[logging.Logger, logging.Handler]:
    """Set up logging for a command.

    Logs are stored at: {log_dir}/{log_name}, unless `log_stderr` is set, in which
    case they are written to stderr and nothing is created on disk. stdout is left
    alone since commands print their results there.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    handler: logging.Handler
    if log_stderr:
        handler = logging.StreamHandler(sys.stderr)
    else:
        file_path = os.path.join(log_dir, log_name)
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        handler = RotatingFileHandler(
            file_path, mode="a", maxBytes=max_bytes, backupCount=backup_count
        )

    if log_formatter:
        handler.setFormatter(log_formatter)
    logger.addHandler(handler)

    return logger, handler
