# mimetable:header:start
#
#   project      : MimeTable
#   file         : dump_config.py
#   file_relpath : src/mimetable/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable `dump-config` command.

Prints the effective configuration (the file passed with ``--config``, or the
one discovered in the working directory) as TOML.
"""

from __future__ import annotations

import click

from mimetable.cli.cmd_common import get_config, get_console
from mimetable.config.loaders import config_to_toml


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
)
def dump_config_command() -> None:
    """Print the configuration in effect for this invocation."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = get_config(ctx)
    if config.is_default and config.source is None:
        console.print("# No configuration file found; built-in defaults are in effect.")
        return
    console.print(config_to_toml(config), nl=False)
