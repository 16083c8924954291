# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import json
import logging
from dataclasses import asdict
from typing import Any, Dict, Literal

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
from pyfstab.schemas.fstab import FstabEntry
from typeguard import typechecked

LOGGER_NAME = "pyfstab"


logger: logging.Logger  # initialization in main()


def as_json_dict(entry: FstabEntry) -> Dict[str, Any]:
    """`asdict`, but keeping track of which kind of device the entry refers to."""
    d = asdict(entry)
    d["device"] = {"kind": entry.device.kind, "value": entry.device.value}
    d["options"] = list(entry.options)
    return d


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
    """Print every fstab entry as a JSON object, one per line."""
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
        logger.error(f"Failed to read fstab: {e}")
        raise click.ClickException(str(e)) from e

    for entry in entries:
        click.echo(json.dumps(as_json_dict(entry)))
