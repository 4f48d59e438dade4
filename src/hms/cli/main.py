"""hms CLI: tools for working with scripts in the game hackmud.

Entry point for the ``hms`` command-line tool. Registers all subcommands
under a single Click group.

Commands:
    sync: Copy local scripts into each user's hackmud scripts folder.

Usage::

    hms sync                          # All .js files below the cwd
    hms sync 'src/**/*.js' --clean    # Clear scripts folders first
    hms sync --hackmud-path ~/hackmud
"""

from __future__ import annotations

import click

from hms import __version__
from hms.cli.sync_cmd import sync_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """hms: CLI tools for working with scripts in the game hackmud."""


cli.add_command(sync_command)
