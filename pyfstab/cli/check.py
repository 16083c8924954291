# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from typing import Literal

import click

from pyfstab.click import (
    log_folder_option,
    log_level_option,
    log_stderr_option,
    path_option,
)
from pyfstab.errors import FstabError
from pyfstab.fstab import open_fstab
from pyfstab.log import init_logger
from typeguard import typechecked

LOGGER_NAME = "pyfstab"


logger: logging.Logger  # initialization in main()


@click.command()
@path_option
@log_level_option
@log_folder_option
@log_stderr_option
@typechecked
def main(
    path: str,
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    log_folder: str,
    log_stderr: bool,
) -> None:
    """
    Check that an fstab file can be parsed. Exits with status 1 and prints the
    error for the first invalid line otherwise.
    """
    global logger
    logger, _ = init_logger(
        logger_name=LOGGER_NAME,
        log_dir=log_folder,
        log_name=LOGGER_NAME + ".log",
        log_level=getattr(logging, log_level),
        log_stderr=log_stderr,
    )

    try:
        entries = open_fstab(path)
    except FstabError as e:
        logger.error(f"{path} is invalid ({e.description}): {e}")
        raise click.ClickException(str(e)) from e

    logger.info(f"{path} is valid")
    click.echo(f"{path}: {len(entries)} entries")
