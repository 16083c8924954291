# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from pathlib import Path
from typing import Any, Dict

import click
import tomli

from pyfstab.coerce import ensure_dict
from pyfstab.fstab import FSTAB_PATH
from typeguard import typechecked

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "/etc/pyfstab/config.toml"
CONFIG_TABLE = "pyfstab"

path_option = click.option(
    "--path",
    type=click.Path(dir_okay=True),
    default=FSTAB_PATH,
    show_default=True,
    help="The fstab file to read.",
)

log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="INFO",
    show_default=True,
    help="Logging verbosity level.",
)

log_folder_option = click.option(
    "--log-folder",
    type=click.Path(file_okay=False),
    default="pyfstab_logs",
    help="The directory where logs will be stored.",
)

log_stderr_option = click.option(
    "--log-stderr",
    is_flag=True,
    default=False,
    help="Write logs to stderr instead of the log folder.",
)


def read_config(path: Path) -> Dict[str, Any]:
    """Read the per-command tables under `[pyfstab]` in a TOML config file, e.g.
    ```
    [pyfstab.check]
    path = "/mnt/sysimage/etc/fstab"
    ```

    A non-existent path or `/dev/null` gives an empty table.

    Raises:
        `tomli.TOMLDecodeError` if the file is not TOML.
        `KeyError` if there is no `[pyfstab]` table.
    """
    if not path.exists() or path == Path("/dev/null"):
        return {}
    with path.open("rb") as f:
        conf = tomli.load(f)
    return ensure_dict(conf[CONFIG_TABLE])


@typechecked
def _load_config(ctx: click.Context, param: click.Parameter, path: Path) -> None:
    try:
        tables = read_config(path)
    except tomli.TOMLDecodeError as e:
        raise click.BadParameter(
            f"{path} does not contain valid TOML.", ctx=ctx, param=param
        ) from e
    except KeyError as e:
        raise click.BadParameter(
            f"{path} has no [{CONFIG_TABLE}] table.", ctx=ctx, param=param
        ) from e

    commands = getattr(ctx.command, "commands", {})
    unknown = sorted(set(tables) - set(commands))
    if unknown:
        raise click.BadParameter(
            f"Unknown commands in [{CONFIG_TABLE}] of {path}: {unknown}. "
            f"Valid commands: {sorted(commands)}",
            ctx=ctx,
            param=param,
        )
    logger.info(f"Loaded config for {sorted(tables)} from {path}")

    # subcommand contexts pick up their own table from the group's default_map
    ctx.default_map = {**(ctx.default_map or {}), **tables}


config_option = click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    callback=_load_config,
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    expose_value=False,
    help=(
        f"Load default option values for each command from the [{CONFIG_TABLE}.<command>] "
        "tables of a TOML file. A non-existent path or '/dev/null' is ignored. "
        "Options passed at the command line take precedence."
    ),
)
