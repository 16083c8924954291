# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A single entrypoint into the pyfstab commands.

This file is intentionally lightweight and should not include any complex logic.
"""

import click

from pyfstab._version import __version__
from pyfstab.cli import check, show
from pyfstab.click import config_option


@click.group(epilog=f"pyfstab Version: {__version__}")
@config_option
@click.version_option(__version__)
def main() -> None:
    """Read and check fstab filesystem tables."""


main.add_command(show.main, name="show")
main.add_command(check.main, name="check")

if __name__ == "__main__":
    main()
